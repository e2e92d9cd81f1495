"""
Resume tailoring: deterministic ATS match scoring for tailored resumes
"""

__version__ = "1.0.0"
