"""Feature modules, one blueprint each."""
