"""Build a searchable emoji database from the Unicode registry and an icon set."""
