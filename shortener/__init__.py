"""URL shortener backend: user registration and login."""
