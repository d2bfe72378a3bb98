import os
from dotenv import load_dotenv

# Load environment variables from .env file
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')

# Load the .env file from that specific path
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """Base configuration class."""

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Workbook layout
    EXPORT_SHEET_NAME = os.getenv('EXPORT_SHEET_NAME', 'DATA')
    EXPORT_PIVOT_SHEET_NAME = os.getenv('EXPORT_PIVOT_SHEET_NAME', 'PIVOT')

    # Structured table identity and style
    EXPORT_TABLE_NAME = os.getenv('EXPORT_TABLE_NAME', 'Data')
    EXPORT_TABLE_DISPLAY_NAME = os.getenv('EXPORT_TABLE_DISPLAY_NAME', 'MYTABLE')
    EXPORT_TABLE_ID = int(os.getenv('EXPORT_TABLE_ID', 1))
    EXPORT_TABLE_STYLE = os.getenv('EXPORT_TABLE_STYLE', 'TableStyleMedium16')

    # Multiplier applied to the character-count width estimate (1.25 - 1.30 looks right in Excel)
    EXPORT_WIDTH_SCALE_FACTOR = float(os.getenv('EXPORT_WIDTH_SCALE_FACTOR', 1.25))
