def count(frame):
    """Number of frames in the tree, i.e. the number of recursive calls"""
    result = 0
    stack = [frame]
    while stack:
        frame = stack.pop()
        result += 1
        stack.extend(frame.children)
    return result

def max_depth(frame):
    """Number of frames on the longest root-to-leaf path, 1 for a lone leaf"""
    result = 0
    stack = [(frame, 1)]
    while stack:
        frame, depth = stack.pop()
        result = max(result, depth)
        for child in frame.children: stack.append((child, depth+1))
    return result

def tree_stats(frame):
    return {
        'count' : count(frame),
        'max_depth' : max_depth(frame),
    }
