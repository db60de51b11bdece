import numpy as np
from sort_frames.frame_tree import check_array

demo_array = [3,5,2,7,8,6,1,9,3,4]

def parse_array(text):
    try: values = [int(x) for x in text.split(',') if x.strip()]
    except ValueError: raise Exception("unknown array '{}', expected comma separated integers".format(text))
    return np.array(values, dtype = np.int64)

def make_array_random(size, seed = None, max_value = 100):
    assert(size >= 0 and max_value > 0)
    rng = np.random.RandomState(seed)
    return rng.randint(0, max_value, size = size).astype(np.int64)

def as_int_array(data):
    if isinstance(data, np.ndarray): return data # dtype is checked by quick_sort
    check_array(data)
    return np.array(data, dtype = np.int64)

if __name__ == "__main__":
    print(parse_array("3, 5,2"))
    print(make_array_random(10, seed = 42))
