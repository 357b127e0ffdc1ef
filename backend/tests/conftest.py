"""Shared test configuration, markers and sample documents."""

import pytest

SAMPLE_RESUME = """Jane Smith
jane.smith@email.com | (555) 987-6543

Summary
Senior backend engineer with 7 years of experience building Python services.

Experience
Senior Software Engineer | DataCorp | 2020 - Present
• Built REST APIs with Django and PostgreSQL serving 2M requests/day
• Deployed services on AWS with Docker and Kubernetes
• Mentored four engineers and introduced unit testing with pytest

Software Engineer | WebWorks | 2017 - 2020
• Developed React frontend components in JavaScript
• Automated CI/CD pipelines with Jenkins

Education
B.S. Computer Science | State University | 2017

Skills
Python, Django, PostgreSQL, Redis, AWS, Docker, Kubernetes, Git, React
"""

SAMPLE_JOB = """Senior Backend Engineer

We are looking for a passionate backend engineer with 5+ years of experience.
Requirements: Python, Django, PostgreSQL, Redis, Docker, Kubernetes and AWS.
Experience with REST APIs, microservices and CI/CD is a plus.
Familiarity with Terraform and GraphQL preferred.
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenario over realistic documents"
    )


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_job() -> str:
    return SAMPLE_JOB
