"""
FieldOps Job Service.

Job lifecycle tracking with workflow audit trails, technician assignment and
scheduling for field-service companies.
"""

__version__ = "0.1.0"
__description__ = "FieldOps Job Service"
