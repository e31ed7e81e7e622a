"""
Error handling middleware
"""
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from utils.exceptions import (
    BusinessError, 
    business_error_handler,
    request_validation_error_handler,
    http_error_handler,
    general_error_handler
)

def add_error_handlers(app: FastAPI):
    """Add error handlers"""
    
    # Pipeline errors (FaceDistortError and subclasses) carry their own status code
    app.add_exception_handler(BusinessError, business_error_handler)
    
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    
    app.add_exception_handler(HTTPException, http_error_handler)
    
    app.add_exception_handler(Exception, general_error_handler)
