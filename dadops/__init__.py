"""Dad-joke command line tool, WSGI server, MongoDB seeding and small utilities."""

__version__ = "0.1.0"