import sys
import numbers
import numpy as np

from .frame import Frame
from .partition import partition

int64_info = np.iinfo(np.int64)

def quick_sort_segment(a, left, right):
    if right <= left: return Frame.leaf(left, right)
    i = partition(a, left, right)
    snapshot = np.array(a, dtype = np.int64)
    snapshot.flags.writeable = False
    children = (
        quick_sort_segment(a, left, i-1),
        quick_sort_segment(a, i+1, right),
    )
    return Frame(left, right, snapshot, i, children)

def check_array(a):
    if isinstance(a, np.ndarray):
        err_msg = "array of shape {} and dtype {} invalid".format(a.shape, a.dtype)
        assert a.ndim == 1, err_msg
        assert np.issubdtype(a.dtype, np.signedinteger), err_msg
    else:
        for x in a:
            err_msg = "%r (%s) invalid" % (x, type(x))
            assert isinstance(x, numbers.Integral) and not isinstance(x, bool), err_msg
            assert int64_info.min <= x <= int64_info.max, err_msg

def check_bounds(a, left, right):
    err_msg = "bounds (%r, %r) for an array of length %d invalid" % (left, right, len(a))
    assert isinstance(left, numbers.Integral) and isinstance(right, numbers.Integral), err_msg
    assert 0 <= left <= right + 1 <= len(a), err_msg

def quick_sort(a, left = 0, right = None):
    """
    Sorts a[left : right+1] in place and returns the root Frame of the recursion.
    By default, the whole array is sorted.
    Bounds and element types are checked once here, not on every recursive step.
    """
    if right is None: right = len(a)-1
    check_array(a)
    check_bounds(a, left, right)

    # the recursion goes as deep as the segment is long for sorted input
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, 2*(right-left+1) + 100))
    try: return quick_sort_segment(a, int(left), int(right))
    finally: sys.setrecursionlimit(limit)
