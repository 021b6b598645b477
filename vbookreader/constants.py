"""Constants and configuration for the vbookreader reader."""

class ReaderConstants:
    """Central configuration constants for the reader."""

    # Layout
    BLANK_PLACEHOLDER = "\u00a0"  # Non-breaking space so blank lines keep their height
    REFERENCE_GLYPH = "0"  # Glyph measured to derive the character budget
    FALLBACK_WIDTH_DIVISOR = 50  # Char width = available width / 50 when unmeasurable
    FALLBACK_CHAR_WIDTH = 8  # Last-resort char width
    PADDING_COLUMNS = 2  # Blank columns on each side of the reading column

    # Scrolling
    CONTEXT_LINES = 2  # Lines kept above the highlighted line
    SCROLL_DURATION = 0.65  # Seconds for one scroll animation
    FRAME_INTERVAL = 1 / 60  # Seconds between animation ticks

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Cache
    CACHE_APP_NAME = "vbookreader"
    CACHE_FILENAME = "last-text.txt"

    # Status messages
    EMPTY_PLACEHOLDER_MESSAGE = "Load a text file to start reading."
    SAVED_MESSAGE = 'Saved "{}" for next time.'
    SAVE_FAILED_MESSAGE = "Loaded file, but could not save it locally."
    READ_FAILED_MESSAGE = "Could not read that file."
    CACHE_LOADED_MESSAGE = "Loaded your last file from cache."
    CACHE_UNAVAILABLE_MESSAGE = "Local storage is unavailable."
