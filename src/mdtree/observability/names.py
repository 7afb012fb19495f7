# src/mdtree/observability/names.py

"""Standard metric names for mdtree observability.

Use these constants instead of hardcoded strings so parser and renderer
metrics stay consistent.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
MARKDOWN_PARSE_DURATION = "markdown_parse_duration"

# Counters
MARKDOWN_PARSE_TOTAL = "markdown_parse_total"
MARKDOWN_LINES_PROCESSED = "markdown_lines_processed"

# Gauges (top-level blocks in the last parsed document)
MARKDOWN_BLOCKS_CREATED = "markdown_blocks_created"


# ============================================================================
# Renderer Metrics
# ============================================================================

# Duration
RENDER_DURATION = "render_duration"

# Counters
RENDER_TOTAL = "render_total"
