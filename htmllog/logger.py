from datetime import datetime, timedelta

from htmllog.date_format import LOG_DATETIME_TEMPLATE, date_to_string
from htmllog.echo import Echo
from htmllog.render import render_document
from htmllog.storage import ensure_day_dirs, log_file_path, write_document

LOG_TYPE_INFO = "INFO"
LOG_TYPE_ERROR = "ERROR"
LOG_TYPE_DEBUG = "DEBUG"

EXCEPTIONS_KEY = "EXCEPTIONS"
EXCEPTIONS_NAME = "Unhandled exceptions"

DUPLICATE_RESET = "reset"
DUPLICATE_REJECT = "reject"

UNSAFE_TITLE_CHARS = set('/\\:*?"<>|')


class SectionNotFoundError(KeyError):
    pass


class DuplicateSectionError(ValueError):
    pass


def _require_str(name, value):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


class Logger:
    """Sectioned run log rendered to one html file.

    Every mutating call rewrites the whole file under
    logs_path/YYYY/MM/DD/. Not thread-safe.
    """

    def __init__(
        self,
        title,
        description,
        logs_path,
        duplicate_sections=DUPLICATE_RESET,
        echo=None,
        clock=None,
    ):
        self.title = _require_str("title", title)
        if UNSAFE_TITLE_CHARS.intersection(title):
            raise ValueError(f"title must not contain path or reserved characters: {title}")
        self.description = str(description or "")
        self.logs_path = str(logs_path)
        if duplicate_sections not in (DUPLICATE_RESET, DUPLICATE_REJECT):
            raise ValueError(f"duplicate_sections must be '{DUPLICATE_RESET}' or '{DUPLICATE_REJECT}'")
        self.duplicate_sections = duplicate_sections
        self.echo = echo
        self.clock = clock or datetime.now
        self.start = self.clock()
        self.end = None
        self.sections = {}

    @classmethod
    def from_config(cls, config, clock=None):
        echo = None
        if config.get("echo") or config.get("runtime_log"):
            echo = Echo(path=config.get("runtime_log", ""), stream_print=bool(config.get("echo")))
        return cls(
            config["title"],
            config.get("description", ""),
            config["logs_path"],
            duplicate_sections=config.get("duplicate_sections", DUPLICATE_RESET),
            echo=echo,
            clock=clock,
        )

    @property
    def path(self):
        return log_file_path(self.logs_path, self.title, self.start)

    def create_section(self, name, key):
        _require_str("key", key)
        if key in self.sections and self.duplicate_sections == DUPLICATE_REJECT:
            raise DuplicateSectionError(f"section already exists: {key}")
        now = self.clock()
        self.sections[key] = {
            "key": key,
            "name": str(name),
            "start": now,
            "end": now,
            "elapsed": "",
            "logs": [],
        }
        self._echo(f"[SECTION][{key}] open {name}")
        self.save()

    def close_section(self, key):
        section = self._get_section(key)
        section["end"] = self.clock()
        section["elapsed"] = (section["end"] - section["start"]) // timedelta(milliseconds=1)
        self._echo(f"[SECTION][{key}] closed elapsed={section['elapsed']}ms")
        self.save()

    def info(self, section_key, value):
        self._push_log(LOG_TYPE_INFO, section_key, value)

    def error(self, section_key, value):
        self._push_log(LOG_TYPE_ERROR, section_key, value)

    def debug(self, section_key, value):
        self._push_log(LOG_TYPE_DEBUG, section_key, value)

    def error_exception(self, message):
        self._log_exception(LOG_TYPE_ERROR, message)

    def debug_exception(self, message):
        self._log_exception(LOG_TYPE_DEBUG, message)

    def save(self):
        self.end = self.clock()
        ensure_day_dirs(self.logs_path, self.start)
        return write_document(self.path, render_document(self))

    def _get_section(self, key):
        section = self.sections.get(key)
        if section is None:
            raise SectionNotFoundError(key)
        return section

    def _push_log(self, log_type, section_key, value):
        section = self._get_section(section_key)
        entry = {
            "type": log_type,
            "value": str(value),
            "dateTime": date_to_string(self.clock(), LOG_DATETIME_TEMPLATE),
        }
        section["logs"].append(entry)
        self._echo(f"[{log_type}][{section_key}] {entry['value']}")
        self.save()

    def _log_exception(self, log_type, message):
        if EXCEPTIONS_KEY not in self.sections:
            self.create_section(EXCEPTIONS_NAME, EXCEPTIONS_KEY)
        self._push_log(log_type, EXCEPTIONS_KEY, message)
        self.close_section(EXCEPTIONS_KEY)

    def _echo(self, msg):
        if self.echo is not None:
            self.echo.log(msg)
