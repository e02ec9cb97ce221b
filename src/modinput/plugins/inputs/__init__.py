"""Built-in modular inputs."""
