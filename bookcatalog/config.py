"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_XML_FILE_PATH = "books.xml"


class Config:
    """Application configuration."""
    
    # Storage
    XML_FILE_PATH = os.getenv("BOOKS_XML_PATH") or DEFAULT_XML_FILE_PATH
    
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    
    # Reports
    DEFAULT_REPORT_FORMAT = os.getenv("DEFAULT_REPORT_FORMAT", "html")
