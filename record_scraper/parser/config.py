import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
# Now BASE_DIR points to .../record_scraper
PROJECT_ROOT = os.path.dirname(BASE_DIR)
OUTPUT_DIR = os.getenv("OUTPUT_DIR", os.path.join(PROJECT_ROOT, "output"))
URL_LIST_FILE = os.getenv("URL_LIST_FILE", os.path.join(PROJECT_ROOT, "urls.txt"))

# --- Extraction ---
TABLE_MARKER = os.getenv("TABLE_MARKER", "wikitable")
HEADER_ROW_STRATEGY = os.getenv("HEADER_ROW_STRATEGY", "first").strip().lower()
MAX_TABLES = int(os.getenv("MAX_TABLES", "0")) or None
HTML_PARSER = os.getenv("HTML_PARSER", "html.parser")
FIELD_KEYWORDS_PATH = os.getenv("FIELD_KEYWORDS_PATH", "")

# --- Fetch ---
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "15"))

# --- API ---
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"
CSV_DOWNLOAD_NAME = os.getenv("CSV_DOWNLOAD_NAME", "record_progression.csv")
