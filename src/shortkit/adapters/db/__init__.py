"""Database plumbing: engine factory, metadata, custom types and schema."""
