import sys

from addthread.core import DemoConfig, run


def main(config: DemoConfig = None):
    config = config or DemoConfig()

    try:
        run(config)
        if config.pause:
            sys.stdin.readline()
    except KeyboardInterrupt:
        pass


if __name__ == '__main__':
    main()
