from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.constants import API_PREFIX, API_VERSION


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify(container.health_service.check())

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify(
            {
                "message": "Welcome to Attendance System API",
                "version": API_VERSION,
                "endpoints": {
                    "employees": f"{API_PREFIX}/employees",
                    "departments": f"{API_PREFIX}/departments",
                    "attendance": f"{API_PREFIX}/attendance",
                    "health": "/health",
                },
            }
        )
