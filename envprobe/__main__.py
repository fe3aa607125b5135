import sys

from envprobe.app import main

if __name__ == '__main__':
    sys.exit(main())
