import os


def log_file_path(logs_path, title, start):
    day_dir = os.path.join(logs_path, f"{start.year:04d}", f"{start.month:02d}", f"{start.day:02d}")
    stamp = start.strftime("%Y%m%d_%H%M%S")
    return os.path.join(day_dir, f"{title}_{stamp}.html")


def ensure_day_dirs(logs_path, start):
    # logs_path itself must exist; only the date levels are created.
    created = []
    current = logs_path
    for part in (f"{start.year:04d}", f"{start.month:02d}", f"{start.day:02d}"):
        current = os.path.join(current, part)
        if not os.path.isdir(current):
            os.mkdir(current)
            created.append(current)
    return created


def write_document(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
