import os
import serverless_wsgi

from recipe_ai import create_app
from recipe_ai.config.settings import ProductionConfig


class LambdaConfig(ProductionConfig):
    # Lambda only allows writes under /tmp
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "/tmp/uploads")
    DATA_DIR = os.getenv("DATA_DIR", "/tmp/data")
    CACHE_DIR = os.getenv("CACHE_DIR", "/tmp/data/cache")


app = create_app(LambdaConfig)


def handler(event, context):
    return serverless_wsgi.handle_request(app, event, context)
