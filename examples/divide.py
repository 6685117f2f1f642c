import logging
import sys

from attempt import Failure, Match, Success, of

logging.basicConfig(level=logging.DEBUG)


def main(numerator: str, denominator: str):
    result = (
        of(lambda: (int(numerator), int(denominator)))
        .map(lambda pair: pair[0] / pair[1])
        .filter(lambda x: x >= 0)
    )
    print(
        result.match(
            Match()
            .case(Success, lambda s: f"Result: {s.value}")
            .case(Failure, lambda f: f"Error: {f.error!r}")
        )
    )


if __name__ == "__main__":
    main(*sys.argv[1:3])
