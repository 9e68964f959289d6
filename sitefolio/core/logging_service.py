"""
Centralized logging service for the Sitefolio API.
Wraps the standard logging module and stamps each record with the
request context (client IP, method, path) when one is active.
"""

import json
import logging
import traceback
from flask import request, has_request_context

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class LoggingService:
    """Application-wide logging helpers"""

    _configured = False

    @staticmethod
    def configure(level='INFO'):
        """Set up the root handler once per process"""
        if LoggingService._configured:
            logging.getLogger().setLevel(level.upper())
            return
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
        LoggingService._configured = True

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return {}

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        return {
            'ip_address': ip_address,
            'method': request.method,
            'request_path': request.path,
        }

    @staticmethod
    def log(level, source, message, details=None):
        """
        Log a message under the sitefolio.<source> logger

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (projects, uploads, app, ...)
            message (str): Main log message
            details (str/dict): Additional details (JSON-encoded if dict)
        """
        context = LoggingService._get_request_context()
        if isinstance(details, dict):
            details = json.dumps(details, default=str)

        parts = [message]
        if context:
            parts.append(f"[{context['method']} {context['request_path']} from {context['ip_address']}]")
        if details:
            parts.append(f"details={details}")

        logging.getLogger(f'sitefolio.{source}').log(
            getattr(logging, level.upper(), logging.INFO), ' '.join(parts)
        )

    @staticmethod
    def debug(source, message, details=None):
        LoggingService.log('DEBUG', source, message, details)

    @staticmethod
    def info(source, message, details=None):
        LoggingService.log('INFO', source, message, details)

    @staticmethod
    def warning(source, message, details=None):
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def log_api_call(source, endpoint, method='GET', status_code=200, details=None):
        """Log API calls"""
        message = f"API {method} {endpoint} - Status: {status_code}"
        level = 'INFO' if 200 <= status_code < 400 else 'WARNING' if status_code < 500 else 'ERROR'
        LoggingService.log(level, source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

