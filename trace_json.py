import sys
from sort_frames import walk
from trace_helpers import make_array_random
from trace_run import run_trace

def frames_to_json(root):
    frames = []
    for visit in walk(root):
        frame = {'left' : visit.left, 'right' : visit.right, 'depth' : visit.depth}
        if visit.has_payload:
            frame['pivot'] = visit.pivot
            frame['snapshot'] = visit.snapshot.tolist()
        frames.append(frame)
    return frames

def run_json_config(config):
    config = dict(config)
    if 'array' in config: data = config.pop('array')
    elif 'size' in config:
        data = make_array_random(config.pop('size'), config.pop('seed', None),
                                 config.pop('max_value', 100))
    else: raise Exception("unknown input, config has neither 'array' nor 'size': {}".format(config))
    left = config.pop('left', 0)
    right = config.pop('right', None)
    verbose = config.pop('verbose', False)
    if config: raise Exception("unknown config keys {}".format(sorted(config)))

    out = run_trace(data, left, right, verbose = verbose, logf = sys.stderr)
    return {
        'sorted' : out['array'].tolist(),
        'count' : out['count'],
        'max_depth' : out['max_depth'],
        'frames' : frames_to_json(out['root']),
    }

if __name__ == "__main__":

    import json

    config = json.loads(sys.stdin.read())
    print(json.dumps(run_json_config(config), indent=4))
