import logging
import os
import re
from collections import namedtuple
from datetime import datetime
from pathlib import Path

from ..color import is_valid_hex
from ..config import load_limits
from ..errors import FileProcessingError, ValidationError

logger = logging.getLogger(__name__)

ParsedThemeFile = namedtuple("ParsedThemeFile", ["colors", "meta", "metadata", "validation"])
ThemeFileMetadata = namedtuple(
    "ThemeFileMetadata", ["file_name", "file_path", "file_size", "line_count", "last_modified"]
)
ValidationResult = namedtuple("ValidationResult", ["warnings", "is_valid"])

# Line classifications
PaletteEntry = namedtuple("PaletteEntry", ["index", "value"])
KnownColorKey = namedtuple("KnownColorKey", ["key", "value"])
Metadata = namedtuple("Metadata", ["key", "value"])
Malformed = namedtuple("Malformed", ["line", "reason"])

MAX_PALETTE_INDEX = 255

# Non-color keys kept as theme metadata; any other key is reported and dropped
METADATA_KEYS = frozenset({"name", "author", "variant", "description", "version"})

# Accepted spelling -> normalized GhosttyColorSet key
KNOWN_COLOR_KEYS = {
    "background": "background",
    "foreground": "foreground",
    "cursor": "cursor",
    "cursor-color": "cursor",
    "cursor_color": "cursor",
    "cursor_text": "cursor_text",
    "cursor-text": "cursor_text",
    "selection_background": "selection_background",
    "selection-background": "selection_background",
    "selection_foreground": "selection_foreground",
    "selection-foreground": "selection_foreground",
}

PALETTE_RE = re.compile(r"^palette\s*=\s*(\d+)\s*=\s*(.+)$")
COLOR_KEY_RE = re.compile(r"^color(\d+)$")
LINE_RE = re.compile(r"^([A-Za-z_][\w-]*)(?:\s*[=:]\s*|\s+)(.+)$")
_UNSAFE_CHARS_RE = re.compile(r"[;<>\"'`]")
_BARE_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_COMMENT_PREFIXES = ("#", "//")


def sanitize_color_value(value):
    """Strip unsafe characters and whitespace, prefixing `#` to bare hex digits.

    The result is not validated; see `normalize_color`.
    """
    sanitized = _UNSAFE_CHARS_RE.sub("", value).strip()
    if _BARE_HEX_RE.match(sanitized):
        sanitized = f"#{sanitized}"
    return sanitized


def normalize_color(value):
    """Sanitize and validate a color value.

    Returns:
        lowercase `#rgb`/`#rrggbb` string, or None if the value is not a color
    """
    sanitized = sanitize_color_value(value)
    return sanitized.lower() if is_valid_hex(sanitized) else None


def classify_line(line):
    """Classify one stripped, non-comment line without touching any state."""
    palette_match = PALETTE_RE.match(line)
    if palette_match:
        index = int(palette_match.group(1))
        if index > MAX_PALETTE_INDEX:
            return Malformed(line, f"palette index {index} is out of range")
        return PaletteEntry(index, palette_match.group(2).strip())

    match = LINE_RE.match(line)
    if not match:
        return Malformed(line, "unrecognized line")

    key, value = match.group(1), match.group(2).strip()
    if key == "palette":
        return Malformed(line, "invalid palette entry")
    if key in KNOWN_COLOR_KEYS:
        return KnownColorKey(key, value)

    color_match = COLOR_KEY_RE.match(key)
    if color_match:
        index = int(color_match.group(1))
        if index > MAX_PALETTE_INDEX:
            return Malformed(line, f"palette index {index} is out of range")
        return PaletteEntry(index, value)

    if key.lower() in METADATA_KEYS:
        return Metadata(key.lower(), value)
    return Malformed(line, f"unknown key {key!r}")


def _truncate(text, limit=20):
    return text if len(text) <= limit else f"{text[:limit]}..."


def parse_theme_text(text, limits=None):
    """Parse Ghostty theme content that is already in memory.

    Args:
        text: Full file content
        limits: ParserLimits (defaults to the environment-configured limits)

    Returns:
        tuple: (colors dict, meta dict, list of warning strings)

    Raises:
        ValidationError: if the content has more lines than allowed
    """
    limits = limits or load_limits()
    raw_lines = text.splitlines()
    if len(raw_lines) > limits.max_lines:
        raise ValidationError(
            f"Too many lines in file (maximum {limits.max_lines})",
            details={"lineCount": len(raw_lines), "maxLines": limits.max_lines},
        )

    lines = [line.strip() for line in raw_lines]
    lines = [line for line in lines if line and not line.startswith(_COMMENT_PREFIXES)]

    colors = {}
    meta = {}
    warnings = []

    if len(lines) > limits.max_config_lines:
        warnings.append(
            f"Too many configuration lines, only the first {limits.max_config_lines} were read"
        )
        lines = lines[: limits.max_config_lines]

    for entry in map(classify_line, lines):
        if isinstance(entry, Malformed):
            warnings.append(f"Skipping line ({entry.reason}): {_truncate(entry.line, 40)}")
            continue

        key = entry.key if not isinstance(entry, PaletteEntry) else f"color{entry.index}"
        if len(key) > limits.max_key_length:
            warnings.append(f"Skipping line with overly long key: {_truncate(key)}")
            continue

        if isinstance(entry, Metadata):
            value = entry.value
            if len(value) > limits.max_value_length:
                warnings.append(f"Value for {key} truncated to {limits.max_value_length} characters")
                value = value[: limits.max_value_length]
            meta[key] = value
            continue

        color = normalize_color(entry.value)
        if color is None:
            warnings.append(f"Invalid color value for {key}: {_truncate(entry.value, 40)}")
            continue
        colors[KNOWN_COLOR_KEYS.get(key, key)] = color

    return colors, meta, warnings


def read_theme_file(file_path, limits=None):
    """Read a theme file after checking the path and its size.

    Returns:
        tuple: (absolute Path, text content, os.stat_result)
    """
    if isinstance(file_path, os.PathLike):
        file_path = os.fspath(file_path)
    if not isinstance(file_path, str) or not file_path.strip():
        raise ValidationError("Invalid file path provided", details={"filePath": file_path})

    limits = limits or load_limits()
    try:
        path = Path(file_path).expanduser().resolve()
    except RuntimeError as exc:
        raise ValidationError(
            f"Invalid file path provided: {exc}", details={"filePath": file_path}
        ) from exc

    try:
        stats = path.stat()
    except OSError as exc:
        raise FileProcessingError(
            f"Failed to read file: {exc.strerror or exc}",
            path=path,
            suggestions=("Check that the file exists", "Verify file permissions"),
        ) from exc

    if stats.st_size > limits.max_file_size:
        raise ValidationError(
            "File is too large",
            path=path,
            details={"fileSize": stats.st_size, "maxSize": limits.max_file_size},
            suggestions=("Choose a smaller file",),
        )

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileProcessingError(
            f"Failed to read file: {exc}",
            path=path,
            suggestions=("Ensure the file is a readable UTF-8 text file",),
        ) from exc

    return path, content, stats


def parse_theme_file(file_path, limits=None):
    """Load a Ghostty theme file into a validated color set.

    Args:
        file_path: Path to the theme text file
        limits: Optional ParserLimits; defaults come from the environment

    Returns:
        ParsedThemeFile with colors, metadata lines, file info and warnings

    Raises:
        ValidationError: bad path, or file over the byte/line limits
        FileProcessingError: the file could not be read
    """
    limits = limits or load_limits()
    path, content, stats = read_theme_file(file_path, limits)

    try:
        colors, meta, warnings = parse_theme_text(content, limits)
    except ValidationError as exc:
        exc.path = path
        raise

    for warning in warnings:
        logger.warning("%s: %s", path.name, warning)
    logger.debug("Parsed %d colors and %d metadata entries from %s", len(colors), len(meta), path)

    metadata = ThemeFileMetadata(
        file_name=path.name,
        file_path=str(path),
        file_size=stats.st_size,
        line_count=len(content.splitlines()),
        last_modified=datetime.fromtimestamp(stats.st_mtime),
    )
    return ParsedThemeFile(
        colors=colors,
        meta=meta,
        metadata=metadata,
        validation=ValidationResult(warnings=tuple(warnings), is_valid=True),
    )
