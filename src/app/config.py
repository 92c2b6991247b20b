import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from a .env file at the root of the project
load_dotenv()

def get_config(key: str, default: Optional[str] = None) -> str:
    """
    Retrieves a configuration value from the environment.

    This function fetches a value based on its key from the environment
    variables, which may have been populated from a .env file. Keys without
    a default are required: if such a key is not found, it raises a
    ValueError so the service never starts with missing configuration.

    Args:
        key: The string name of the configuration variable to retrieve.
        default: Value to use when the key is absent. None makes the key
            required.

    Returns:
        The configuration value as a string.

    Raises:
        ValueError: If the key is not found and no default was given.
    """
    value = os.getenv(key)
    if value is None:
        if default is not None:
            return default
        raise ValueError(f"Error: Configuration key '{key}' not found in .env file.")
    return value
