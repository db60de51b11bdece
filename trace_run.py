import sys
from sort_frames import quick_sort, tree_stats, walk, frame_label
from trace_helpers import as_int_array

"""
Parameters:
  data:
    integers to sort, a signed integer numpy array is sorted in place,
    anything else is first converted to an np.int64 array
  left, right -- default: 0, len(data)-1:
    inclusive bounds of the sorted segment
  verbose, logf -- default: True, sys.stdout
    if verbose is True, every frame of the recursion (in pre-order)
    and a final summary are printed to logf
Returns a dict with
  'array' : the sorted array,
  'root' : the root Frame,
  'count', 'max_depth' : the tree metrics
"""
def run_trace(data, left = 0, right = None, verbose = True, logf = sys.stdout):
    a = as_int_array(data)

    root = quick_sort(a, left, right)
    out = dict(tree_stats(root))

    if verbose:
        for visit in walk(root):
            line = "  "*visit.depth + frame_label(visit)
            if visit.has_payload:
                line += " {} pivot {}".format(visit.snapshot.tolist(), visit.pivot)
            logf.write(line+"\n")
            logf.flush()
        logf.write("sorted {} frames {} max_depth {}\n".format(
            a.tolist(), out['count'], out['max_depth']))
        logf.flush()

    out['array'] = a
    out['root'] = root
    return out
