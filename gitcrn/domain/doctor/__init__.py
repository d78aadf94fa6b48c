"""
Doctor domain module
"""
from .service import CheckResult, DoctorService, tool_version

__all__ = ["CheckResult", "DoctorService", "tool_version"]
