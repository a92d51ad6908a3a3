import argparse
import os
import sys
from typing import List, Optional, TextIO

from .config import MAX_BITS, env_defaults
from .copier import copy_runes_with_patience
from .durations import parse_duration
from .errors import ConfigError
from .flush import Discard
from .patience import be_patient, print_impatiently


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    # defaults are strings so argparse runs them through the same type conversion as flags
    env = env_defaults()
    parser = argparse.ArgumentParser(
        prog="aslap",
        description="as slow as possible",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--base", type=_duration, default=env["base"],
                        help="the base delay per character")
    parser.add_argument("--step", type=_duration, default=env["step"],
                        help="the amount of proportional delay added per character")
    parser.add_argument("--bits", type=int, default=env["bits"],
                        help=f"the number of bits per character used to determine the delay (0-{MAX_BITS})")
    parser.add_argument("--debug", action="store_true", default=env["debug"],
                        help="print the input character and the calculated delay instead of the output")
    return parser


def _silence_stdout() -> None:
    # the reader is gone; keep the interpreter's final flush from raising again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None, *,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        delay = be_patient(args.bits, args.base, args.step)
    except ConfigError as e:
        parser.error(str(e))

    real_stdout = stdout is None
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    src, dst = stdin.buffer, stdout.buffer
    if args.debug:
        dst = Discard()
        delay = print_impatiently(stdout, delay)

    try:
        copy_runes_with_patience(dst, src, delay)
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        if real_stdout:
            _silence_stdout()
        print("aslap: output closed", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"aslap: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
