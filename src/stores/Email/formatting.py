from email.utils import formataddr
import html


def format_sender(from_email: str, from_name: str = "") -> str:
    if from_name:
        return formataddr((from_name, from_email))
    return from_email


def summary_to_html(body: str) -> str:
    """Escape a plain-text summary and keep its line breaks."""
    lines = html.escape(body).splitlines()
    return "\n".join([
        "<html>",
        '<body style="font-family: Arial, sans-serif; line-height: 1.5;">',
        "<br>\n".join(lines),
        "</body>",
        "</html>",
    ])
