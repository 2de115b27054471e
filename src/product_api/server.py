import argparse
import logging
from dataclasses import replace
from typing import Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from . import __version__
from . import query as product_query
from .auth import API_KEY_HEADER, require_key
from .config import Settings, configure_logging, get_settings
from .errors import ApiError, ErrorKind, error_response
from .stats import aggregate
from .store import SAMPLE_PRODUCTS, ProductStore
from .validation import parse_product


logger = logging.getLogger(__name__)

ENDPOINTS = {
    "products": "/api/products",
    "search": "/api/products/search/:query",
    "stats": "/api/products/stats",
}


def _store() -> ProductStore:
    return current_app.extensions["product_store"]


def _settings() -> Settings:
    return current_app.extensions["product_settings"]


def _json_body() -> dict:
    data = request.get_json(force=True, silent=True)
    if data is None:
        if request.get_data(cache=True).strip():
            raise ApiError(ErrorKind.MALFORMED_BODY)
        data = {}
    return data


def _log_request() -> None:
    logger.info("%s %s", request.method, request.full_path.rstrip("?"))


def _check_api_key() -> None:
    if request.path == "/api" or request.path.startswith("/api/"):
        require_key(request.method, request.headers.get(API_KEY_HEADER), _settings().api_key)


def index():
    return jsonify({
        "message": "Welcome to the Product API!",
        "version": __version__,
        "endpoints": ENDPOINTS,
        "documentation": "See README.md for full API documentation",
        "note": f"Add {API_KEY_HEADER} header for POST, PUT, DELETE operations",
    })


def list_products():
    page, info = product_query.query(_store().list(), request.args)
    return jsonify({
        "success": True,
        "data": [p.to_dict() for p in page],
        "pagination": info.to_dict(),
    })


def get_product(product_id: str):
    return jsonify({"success": True, "data": _store().get(product_id).to_dict()})


def create_product():
    fields = parse_product(_json_body())
    product = _store().create(fields)
    logger.info("Created product %s", product.id)
    return jsonify({
        "success": True,
        "message": "Product created successfully",
        "data": product.to_dict(),
    }), 201


def update_product(product_id: str):
    fields = parse_product(_json_body())
    product = _store().update(product_id, fields)
    logger.info("Updated product %s", product.id)
    return jsonify({
        "success": True,
        "message": "Product updated successfully",
        "data": product.to_dict(),
    })


def delete_product(product_id: str):
    product = _store().delete(product_id)
    logger.info("Deleted product %s", product.id)
    return jsonify({
        "success": True,
        "message": "Product deleted successfully",
        "data": product.to_dict(),
    })


def search_products(text: str):
    results = product_query.search(_store().list(), text)
    return jsonify({
        "success": True,
        "query": text,
        "results": len(results),
        "data": [p.to_dict() for p in results],
    })


def product_stats():
    return jsonify({"success": True, "data": aggregate(_store().list()).to_dict()})


def _respond(error: BaseException):
    body, status = error_response(error, _settings().expose_diagnostics)
    log = logger.error if status >= 500 else logger.warning
    log("Error occurred: %s", body["message"], exc_info=error)
    return jsonify(body), status


def handle_http_exception(error: HTTPException):
    if isinstance(error, (NotFound, MethodNotAllowed)):
        logger.warning("Route %s %s not found", request.method, request.path)
        return jsonify({
            "success": False,
            "message": f"Route {request.method} {request.full_path.rstrip('?')} not found",
            "availableEndpoints": ENDPOINTS,
        }), ErrorKind.ROUTE_NOT_FOUND.status
    logger.warning("HTTP %s: %s", error.code, error.description)
    return jsonify({"success": False, "message": error.description}), error.code


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> Flask:
    settings = settings or get_settings()
    if store is None:
        store = ProductStore()
        if settings.seed_sample_products:
            store.load(SAMPLE_PRODUCTS)

    app = Flask(__name__)
    app.extensions["product_settings"] = settings
    app.extensions["product_store"] = store

    app.before_request(_log_request)
    app.before_request(_check_api_key)

    app.get("/")(index)
    app.get("/api/products")(list_products)
    app.post("/api/products")(create_product)
    app.get("/api/products/stats")(product_stats)
    app.get("/api/products/search/<text>")(search_products)
    app.get("/api/products/<product_id>")(get_product)
    app.put("/api/products/<product_id>")(update_product)
    app.delete("/api/products/<product_id>")(delete_product)

    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(ApiError, _respond)
    app.register_error_handler(Exception, _respond)
    return app


def _log_banner(settings: Settings) -> None:
    base = f"http://{settings.host}:{settings.port}"
    logger.info("Product API server starting on %s (env=%s)", base, settings.env)
    logger.info("API base URL: %s/api", base)
    logger.info("Available endpoints:")
    for line in (
        "GET    /api/products - Get all products",
        "GET    /api/products/:id - Get product by ID",
        "POST   /api/products - Create product",
        "PUT    /api/products/:id - Update product",
        "DELETE /api/products/:id - Delete product",
        "GET    /api/products/search/:query - Search products",
        "GET    /api/products/stats - Get statistics",
    ):
        logger.info("  %s", line)
    logger.info("Query parameters: category, inStock, search, page, limit")


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the in-memory product API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    args = parser.parse_args()

    settings = replace(settings, host=args.host, port=args.port)
    configure_logging(settings.log_level)
    app = create_app(settings)
    _log_banner(settings)
    # threaded=True serves requests concurrently; the store serialises access
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
