"""Domain layer: value types, protocols and events shared by the core and the UI."""
