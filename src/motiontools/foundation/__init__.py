"""Foundation layer: errors, configuration, validation and the tool registry."""
