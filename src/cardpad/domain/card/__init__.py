"""Card documents: the plain-text note format, its parser, renderer and navigation."""
