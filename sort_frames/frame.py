from collections import namedtuple
import numpy as np

def owned_snapshot(snapshot):
    # a read-only int64 array owning its memory can be shared without a copy
    return isinstance(snapshot, np.ndarray) and snapshot.dtype == np.int64\
        and snapshot.base is None and not snapshot.flags.writeable

class Frame(namedtuple('Frame', ['left', 'right', 'snapshot', 'pivot', 'children'])):
    """
    One invocation of quick_sort_segment.
      left, right:
        inclusive bounds of the covered segment, right < left is an empty segment
      snapshot:
        read-only copy of the whole array right after partitioning,
        None for a leaf
      pivot:
        index where the pivot ended up, None for a leaf
      children:
        () for a leaf, otherwise the frames of [left, pivot-1] and [pivot+1, right]
    """
    __slots__ = ()

    def __new__(cls, left, right, snapshot = None, pivot = None, children = ()):
        children = tuple(children)
        if right > left:
            err_msg = "frame ({}, {}) with pivot {} invalid".format(left, right, pivot)
            assert snapshot is not None and len(children) == 2, err_msg
            assert left <= pivot <= right, err_msg
            assert (children[0].left, children[0].right) == (left, pivot-1), err_msg
            assert (children[1].left, children[1].right) == (pivot+1, right), err_msg
            if not owned_snapshot(snapshot):
                snapshot = np.array(snapshot, dtype = np.int64)
                snapshot.flags.writeable = False
        else:
            assert snapshot is None and pivot is None and not children,\
                "leaf frame ({}, {}) with a payload invalid".format(left, right)
        return super().__new__(cls, left, right, snapshot, pivot, children)

    @classmethod
    def leaf(cls, left, right):
        return cls(left, right)

    @property
    def has_payload(self):
        return self.snapshot is not None
    @property
    def is_leaf(self):
        return not self.children

    def __repr__(self):
        if self.is_leaf: return "Frame({}, {})".format(self.left, self.right)
        return "Frame({}, {}, pivot = {})".format(self.left, self.right, self.pivot)
