import os

from dotenv import load_dotenv

# Load a local .env for development; real environment variables take precedence
load_dotenv()

DEFAULT_PORT = 8080

PORT = int(os.getenv("PORT", DEFAULT_PORT))
