"""zlang: a class-based dialect of C that transpiles to plain C."""
