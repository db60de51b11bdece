from sort_frames.frame import Frame
from sort_frames.partition import partition
from sort_frames.frame_tree import quick_sort, quick_sort_segment
from sort_frames.metrics import count, max_depth, tree_stats
from sort_frames.traversal import FrameVisit, walk, frame_label
