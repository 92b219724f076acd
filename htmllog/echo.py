import os
from datetime import datetime


class Echo:
    def __init__(self, path="", stream_print=True):
        self.path = path
        self.stream_print = stream_print
        if path:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)

    def log(self, msg):
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {msg}"
        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        if self.stream_print:
            print(line)
        return line
