# record_scraper/scraper_webapp.py
# ==============================================================
# Flask API over the record parser pipeline.
#   GET /api/scrape?url=...        -> {"data": [record, ...]}
#   GET /api/scrape/csv?url=...    -> CSV download
#   GET /api/scrape/chart?url=...  -> {"labels": [...], "values": [...]}
# Every request owns its own result; nothing is cached between requests.
# ==============================================================

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from record_scraper.parser.config import CSV_DOWNLOAD_NAME, FLASK_DEBUG, TABLE_MARKER
from record_scraper.parser.html_record_parser import scrape_url
from record_scraper.parser.utils.download_utils import FetchError, InvalidURLError
from record_scraper.parser.utils.html_scanner import DocumentParseError
from record_scraper.parser.utils.logger_instance import logger
from record_scraper.parser.utils.output_utils import records_to_chart_series, records_to_csv, records_to_rows

app = Flask(__name__)


class ScrapeRequestError(Exception):
    def __init__(self, message, status):
        super().__init__(message)
        self.message = message
        self.status = status


def scrape_from_request():
    url = request.args.get("url", "").strip()
    if not url:
        raise ScrapeRequestError('Missing "url" query parameter', 400)
    marker = request.args.get("marker", TABLE_MARKER)
    detect = request.args.get("detect_header", "false").lower() == "true"
    options = {"table_marker": marker}
    if detect:
        options["header_strategy"] = "detect"
    try:
        return scrape_url(url, **options)
    except InvalidURLError as e:
        raise ScrapeRequestError(str(e), 400) from e
    except FetchError as e:
        raise ScrapeRequestError("Failed to fetch the page", 500) from e
    except DocumentParseError as e:
        raise ScrapeRequestError(f"Could not parse the page: {e}", 400) from e


@app.errorhandler(ScrapeRequestError)
def handle_scrape_error(e):
    return jsonify({"error": e.message}), e.status


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception(f"[API] Scraping error: {e}")
    return jsonify({"error": "An error occurred"}), 500


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/scrape")
def scrape():
    records = scrape_from_request()
    return jsonify({"data": records_to_rows(records)}), 200


@app.route("/api/scrape/csv")
def scrape_csv():
    records = scrape_from_request()
    return Response(
        records_to_csv(records),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={CSV_DOWNLOAD_NAME}"},
    )


@app.route("/api/scrape/chart")
def scrape_chart():
    records = scrape_from_request()
    return jsonify(records_to_chart_series(records)), 200


if __name__ == "__main__":
    app.run(debug=FLASK_DEBUG)
