"""GitHub repository client abstractions and the PyGithub adapter."""
