import sys
from os.path import dirname, abspath

root_dir = dirname(dirname(abspath(__file__)))
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)
