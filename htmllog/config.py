import json
import os

from htmllog.logger import DUPLICATE_REJECT, DUPLICATE_RESET, UNSAFE_TITLE_CHARS


def load_config(path="htmllog.json"):
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)


def validate_config(config):
    errors = []
    warnings = []

    def push_error(msg):
        errors.append(msg)

    def push_warn(msg):
        warnings.append(msg)

    if not isinstance(config, dict):
        push_error("Config must be a JSON object.")
        return errors, warnings

    title = config.get("title")
    if not isinstance(title, str) or not title.strip():
        push_error("title is required and must be a non-empty string.")
    elif UNSAFE_TITLE_CHARS.intersection(title):
        push_error("title must not contain path or reserved characters.")

    description = config.get("description", "")
    if not isinstance(description, str):
        push_error("description must be a string.")

    logs_path = config.get("logs_path")
    if not isinstance(logs_path, str) or not logs_path:
        push_error("logs_path is required and must be a non-empty string.")
    elif not os.path.isdir(logs_path):
        push_warn(f"logs_path does not exist yet: {logs_path}")

    duplicate = config.get("duplicate_sections", DUPLICATE_RESET)
    if duplicate not in (DUPLICATE_RESET, DUPLICATE_REJECT):
        push_error("duplicate_sections must be 'reset' or 'reject'.")

    echo = config.get("echo", False)
    if not isinstance(echo, bool):
        push_error("echo must be true or false.")

    runtime_log = config.get("runtime_log", "")
    if not isinstance(runtime_log, str):
        push_error("runtime_log must be a string.")

    return errors, warnings


def report_validation(errors, warnings):
    for item in warnings:
        print(f"[WARN] {item}")
    if errors:
        for item in errors:
            print(f"[ERROR] {item}")
        raise SystemExit("Config validation failed.")
