from collections import namedtuple

FrameVisit = namedtuple('FrameVisit', ['left', 'right', 'depth', 'has_payload', 'snapshot', 'pivot'])

def walk(root):
    """
    Pre-order walk over a finished tree: a frame first,
    then the whole subtree of its left child, then the one of its right child.
    Yields FrameVisit records, the root has depth 0.
    """
    stack = [(root, 0)]
    while stack:
        frame, depth = stack.pop()
        yield FrameVisit(frame.left, frame.right, depth,
                         frame.has_payload, frame.snapshot, frame.pivot)
        for child in reversed(frame.children): # left child on top
            stack.append((child, depth+1))

def frame_label(visit):
    return "qS({}, {}, ...)".format(visit.left, visit.right)
