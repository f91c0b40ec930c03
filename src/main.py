#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from tisasm import Config
from tisasm import ParseError
from tisasm import parseFile
import os
import sys
import yaml


def loadSpec(file_path, config, error=print):
    if not os.path.isfile(file_path):
        error("File does not exist: %r" % file_path)
        return None

    try:
        return parseFile(file_path, config)

    except ParseError as e:
        error("In %r, %s" % (file_path, e))

    except (OSError, UnicodeDecodeError) as e:
        error("Unable to read %r: %s" % (file_path, e))

    return None


def dumpSpec(spec, outf=None):
    if outf is None:
        outf = sys.stdout

    yaml.safe_dump(spec.toObj(), outf, sort_keys=False, default_flow_style=False)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    def error(*args, **kargs):
        print("While trying to parse the program, encountered the following error:\n", file=sys.stderr)
        print(*args, file=sys.stderr, **kargs)

    if argv:
        file_path = argv[0]
    else:
        file_path = input("Enter program path: ")
        if not file_path:
            return 1

    if len(argv) > 1:
        config = Config.fromYaml(argv[1], error)
        if config is None:
            return 1

    else:
        config = Config()

    spec = loadSpec(file_path, config, error)
    if spec is None:
        return 1

    dumpSpec(spec)
    return 0


if __name__ == "__main__":
    sys.exit(main())
