"""Personal rankings saved by an address against a template."""
