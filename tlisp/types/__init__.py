"""Runtime data types: values, environments and closures."""
