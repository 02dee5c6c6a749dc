"""Version 1 of the Bookstore API."""
