"""next-unused: find files in a Next.js project that no route can reach."""

__version__ = "0.1.0"
