#!/usr/bin/env python
"""
Main application entry point for the Subscription Plan Service.
"""
from subscription_service import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
