"""Infrastructure layer: schema catalog and record file loading."""
