#!/usr/bin/env python

"""
    hello_world.py:
    Lambda function deployed alongside the custom resource provider.
    Returns a greeting and shows process and request scoped logging.
"""

import logging
import os

# set logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

GREETING = "Hello World 👋. Welcome to AWS Lambda! 🙌🎉🍾"


def lambda_handler(event, context):

    logger.info("Accessing structured logger 🙌")

    request_id = getattr(context, 'aws_request_id', None)

    if request_id:
        request_logger = logging.LoggerAdapter(logger, {'request_id': request_id})
        request_logger.info(f"Accessing request-scoped log, with request ID field: {request_id}")
    else:
        logger.warning("Failed to access scoped logger")

    return GREETING
