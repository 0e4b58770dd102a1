"""Personal journaling service: month-partitioned logs with inline {tags}."""
