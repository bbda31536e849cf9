from mutmut.__main__ import climain
import subprocess
import sys


original_popen = subprocess.Popen

def popen(cmd, *args, **kwargs):
    # Run the test suite with the interpreter mutmut itself runs under
    if isinstance(cmd, list) and cmd[0] == "python":
        cmd = [sys.executable] + cmd[1:]
    return original_popen(cmd, *args, **kwargs)

subprocess.Popen = popen


if __name__ == "__main__":
    climain()
