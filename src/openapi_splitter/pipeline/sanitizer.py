"""Redact credentials and personal data from example payloads.

``clean_examples`` walks any JSON-like value (None, bool, number, str, list,
dict) and returns a new copy with auth tokens, session cookies, email
addresses and masked secrets replaced. The only in-place edit is the
``x-readme`` code-sample block, which by then belongs to a deep-copied
operation.
"""

import re

REDACTED = "REDACTED"
PLACEHOLDER_EMAIL = "user@example.com"
PLACEHOLDER_AUTH = "Authorization: Basic XXXXXX"

SENSITIVE_PATTERNS = [
    re.compile(r"Bearer\s+[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"Basic\s+[A-Za-z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"_cfuvid=[^;'\"\s]+"),
    re.compile(r"Cookie:\s*[^'\"]+", re.IGNORECASE),
]

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

_COOKIE_PREFIX = re.compile(r"^Cookie:", re.IGNORECASE)
_MASKED = re.compile(r"[•*]+")

# curl samples in x-readme blocks
_CURL_AUTH_SINGLE = re.compile(r"--header\s+'Authorization:\s*[^']*'")
_CURL_AUTH_DOUBLE = re.compile(r'--header\s+"Authorization:\s*[^"]*"')
_CURL_COOKIE_SINGLE = re.compile(r"--header\s+'Cookie:\s*[^']*'")
_CURL_COOKIE_DOUBLE = re.compile(r'--header\s+"Cookie:\s*[^"]*"')

README_KEY = "x-readme"


def clean_examples(value):
    """Return a redacted copy of value."""
    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        return clean_string(value)

    if isinstance(value, list):
        return [clean_examples(item) for item in value]

    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if key == README_KEY:
                result[key] = clean_readme_block(item)
            else:
                result[key] = clean_examples(item)
        return result

    return value


def clean_string(text: str) -> str:
    cleaned = text
    for pattern in SENSITIVE_PATTERNS:
        cleaned = pattern.sub(REDACTED, cleaned)

    cleaned = EMAIL_PATTERN.sub(PLACEHOLDER_EMAIL, cleaned)

    if _COOKIE_PREFIX.match(cleaned):
        return ""

    if _MASKED.fullmatch(cleaned.strip()):
        return REDACTED

    return cleaned


def clean_readme_block(block):
    """Scrub curl samples under ``code-samples``. Edits block in place."""
    if not isinstance(block, dict):
        return block

    samples = block.get("code-samples")
    if isinstance(samples, list):
        for sample in samples:
            if isinstance(sample, dict) and isinstance(sample.get("code"), str):
                sample["code"] = clean_code_sample(sample["code"])

    return block


def clean_code_sample(code: str) -> str:
    code = _CURL_AUTH_SINGLE.sub(f"--header '{PLACEHOLDER_AUTH}'", code)
    code = _CURL_AUTH_DOUBLE.sub(f'--header "{PLACEHOLDER_AUTH}"', code)
    code = _CURL_COOKIE_SINGLE.sub("", code)
    code = _CURL_COOKIE_DOUBLE.sub("", code)
    return EMAIL_PATTERN.sub(PLACEHOLDER_EMAIL, code)
