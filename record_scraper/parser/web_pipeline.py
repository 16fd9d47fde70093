from concurrent.futures import ThreadPoolExecutor, as_completed

from .html_record_parser import scrape_url
from .utils.download_utils import FetchError
from .utils.html_scanner import DocumentParseError
from .utils.logger_instance import logger


def _emit(output_callback, line):
    if output_callback:
        output_callback(line)


def process_single_url(url, output_callback, idx, total, **options):
    _emit(output_callback, f"[Parsing {idx}/{total}] {url}")
    try:
        records = scrape_url(url, **options)
    except (FetchError, DocumentParseError) as e:
        _emit(output_callback, f"[ERROR] {url}: {e}")
        return None
    except Exception as e:
        logger.exception(f"[PIPELINE] Unexpected error while processing {url}: {e}")
        _emit(output_callback, f"[ERROR] Exception while processing {url}: {e}")
        return None
    _emit(output_callback, f"[DONE] {url}: {len(records)} record(s)")
    return records


def scrape_urls(urls, output_callback=None, max_workers=2, **options):
    """
    Scrapes several URLs in parallel.
    Each URL is an independent extraction; a failure maps that URL to None
    and the rest carry on. Returns {url: records or None}.
    """
    results = {}
    if not urls:
        _emit(output_callback, "[ERROR] No URLs provided.")
        return results

    total = len(urls)
    logger.info(f"[PIPELINE] Starting batch for {total} URL(s) with {max_workers} worker(s).")
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {
            executor.submit(process_single_url, url, output_callback, idx, total, **options): url
            for idx, url in enumerate(urls, 1)
        }
        completed = 0
        for future in as_completed(futures):
            completed += 1
            results[futures[future]] = future.result()
            _emit(output_callback, f"[PROGRESS] {completed}/{total} URLs complete.")
    return results
