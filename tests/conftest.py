"""
Shared fixtures for the API, repository and client tests.
"""
import pytest
from rest_framework.test import APIClient, RequestsClient

from showcase import repository
from showcase.client import ClientController, PortfolioClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def portfolio_client(db):
    """PortfolioClient whose requests are served in-process by the Django app."""
    return PortfolioClient(base_url="http://testserver", session=RequestsClient())


@pytest.fixture
def controller(portfolio_client):
    return ClientController(api=portfolio_client)


@pytest.fixture
def sample_project():
    return {
        "title": "Ray Tracer",
        "description": "A tiny path tracer written over a weekend.",
        "image_url": "https://example.com/ray.png",
        "link": "https://example.com/ray",
        "category": "Featured",
    }


@pytest.fixture
def seeded(db, sample_project):
    """Two projects and one entry of each resume type."""
    ids = {
        "featured": repository.projects.insert(sample_project),
        "web": repository.projects.insert({"title": "Shop", "category": "Web"}),
        "job": repository.resume_entries.insert({
            "title": "Engineer", "company": "Acme", "duration": "2020 - 2023",
            "description": "Built things.", "type": "experience",
        }),
        "degree": repository.resume_entries.insert({
            "title": "BSc Computer Science", "company": "State University",
            "duration": "2016 - 2020", "description": "", "type": "education",
        }),
    }
    return ids
