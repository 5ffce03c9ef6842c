"""
Constants for the conversion pipeline.

Flattening joins nested object keys with PATH_SEPARATOR:
    {"contact": {"email": "a@b.c"}}  ->  contact.email

Arrays are never expanded into columns. Arrays of primitives become one cell
with the elements on separate lines (LIST_ITEM_SEPARATOR); arrays holding
objects or arrays become one compact JSON cell.
"""

# Delimiter between parent and child keys in flattened column names
PATH_SEPARATOR = "."

# Joins the elements of a primitive array inside a single cell
LIST_ITEM_SEPARATOR = "\n"

# Column used when a document's root is not an object
ROOT_VALUE_KEY = "value"

# CSV output: CRLF rows and a UTF-8 byte-order mark so spreadsheet tools
# detect the encoding and keep embedded newlines inside cells
CSV_LINE_TERMINATOR = "\r\n"
CSV_DELIMITER = ","
UTF8_BOM = "\ufeff"
OUTPUT_ENCODING = "utf-8"

DEFAULT_OUTPUT_FILENAME = "profiles.csv"
INPUT_FILE_EXTENSION = ".json"

# Reads are issued concurrently, one per file, capped at this many threads
READER_MAX_WORKERS = 8

# Row strategies selectable from the UI
STRATEGY_MERGED = "merged"
STRATEGY_PROFILE = "profile"

# Hosts treated as social profiles by the fixed profile mapping.
# Sub-domains match too (m.facebook.com, uk.linkedin.com).
EXCLUDED_SOCIAL_DOMAINS = (
    "facebook.com",
    "fb.com",
    "instagram.com",
    "linkedin.com",
    "twitter.com",
    "x.com",
    "tiktok.com",
    "youtube.com",
    "youtu.be",
    "pinterest.com",
    "snapchat.com",
    "threads.net",
)
