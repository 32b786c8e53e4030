# ecommerce_api/__main__.py
"""
Run the API with:
    python -m ecommerce_api
"""

from ecommerce_api.main import main

main()
