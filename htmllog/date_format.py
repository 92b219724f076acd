LOG_DATETIME_TEMPLATE = "dd/mm/yyyy H:i:s"


def date_to_string(value, template):
    """Fill dd/mm/yyyy/H/i/s tokens of template from value.

    Only the first occurrence of each token is replaced, in that order.
    """
    text = str(template)
    text = text.replace("dd", f"{value.day:02d}", 1)
    text = text.replace("mm", f"{value.month:02d}", 1)
    text = text.replace("yyyy", str(value.year), 1)
    text = text.replace("H", str(value.hour), 1)
    text = text.replace("i", str(value.minute), 1)
    text = text.replace("s", str(value.second), 1)
    return text


def format_log_datetime(value):
    if value is None:
        return "-"
    return date_to_string(value, LOG_DATETIME_TEMPLATE)
