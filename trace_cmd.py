import sys
from trace_helpers import demo_array, parse_array, make_array_random
from trace_run import run_trace

if __name__ == "__main__":
    import argparse

    cmd_parser = argparse.ArgumentParser(prog='trace_cmd',
                                         description='Quick sort with a recorded tree of recursive calls',
                                         formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    cmd_parser.add_argument("--array", default=','.join(map(str, demo_array)), type=str,
                            help="comma separated integers to sort")
    cmd_parser.add_argument("--size", default=None, type=int,
                            help="sort a random array of the given size instead of --array")
    cmd_parser.add_argument("--seed", default=42, type=int, help="Random seed")
    cmd_parser.add_argument("--max_value", default=100, type=int, help="random values are taken from [0, max_value)")
    cmd_parser.add_argument("--left", default=0, type=int, help="first index of the sorted segment")
    cmd_parser.add_argument("--right", default=None, type=int, help="last index of the sorted segment, the last index of the array if not set")
    cmd_parser.add_argument('--quiet', dest='verbose', action='store_false',
                            help = "print only the summary line")
    cmd_parser.set_defaults(verbose=True)
    cmd_parser.add_argument("--log", default=None, type=str, help="append the output to this file instead of stdout")

    config = cmd_parser.parse_args()

    if config.size is not None: data = make_array_random(config.size, config.seed, config.max_value)
    else: data = parse_array(config.array)

    def run(logf):
        out = run_trace(data, config.left, config.right, verbose = config.verbose, logf = logf)
        if not config.verbose:
            logf.write("frames {} max_depth {}\n".format(out['count'], out['max_depth']))

    if config.log is None: run(sys.stdout)
    else:
        with open(config.log, 'a') as logf: run(logf)
