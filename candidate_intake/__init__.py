"""
Candidate Intake - applicant-tracking submission service.

Accepts candidate submissions (personal data, education, work experience
and an optional CV), validates them and persists them to MongoDB.
"""

__version__ = "0.1.0"
__app_name__ = "Candidate Intake"
