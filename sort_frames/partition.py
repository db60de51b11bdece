def partition(a, left, right):
    """
    Rearranges a[left : right+1] around the pivot value a[right]
    and returns the final index of the pivot.
    Everything before that index is <= pivot, everything after it is >= pivot.
    """
    assert left < right, "partition of ({}, {}) invalid".format(left, right)
    pivot = a[right]
    i = left
    j = right - 1
    while True:
        while a[i] < pivot and i < right: i += 1
        while a[j] > pivot and j > left: j -= 1
        if i >= j: break
        a[i], a[j] = a[j], a[i]
        if a[i] == a[j]: # both equal to the pivot, the cursors would stay put
            i += 1
            j -= 1
    a[i], a[right] = a[right], a[i]
    return i
