"""Pure walk domain: depth ranges, entries, format programs and command templates."""
