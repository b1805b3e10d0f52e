"""Test configuration and fixtures."""

import pytest

# Postings in the shape recruiters actually paste them
JAVA_ONSITE_POSTING = (
    "\U0001F4A5 Sr. Java Developer – Onsite\n"
    "\U0001F4CD Des Moines, IA (Local Only – DL Required)\n"
    "⏳ 6 Months CTH\n"
    "Must Have:\n"
    "Java, Spring Boot, RabbitMQ"
)

HYBRID_DATA_POSTING = """Hello Connections,
We are accepting resumes for the role of Data Engineer
hashtag#hiring #dataengineering
Role: Senior Data Engineer
Location: Charlotte, NC (3 days onsite)
Client: Bank of America
Pay: $120k - $150k
Experience: 8+ years
Required Skills:
- Python; Spark + Kafka
- Snowflake (must), Airflow
Nice to have: Terraform, Docker
Submitted by: Raj Kumar | raj.kumar@techsource.com | (704) 555-0199
"""

HOURLY_REMOTE_POSTING = """Acme Analytics is hiring for React Developer
Fully remote, W2 only
Rate: $65/hr
5 years of experience with React and TypeScript
jobs@acme-analytics.com
"""


@pytest.fixture
def java_onsite_posting():
    return JAVA_ONSITE_POSTING


@pytest.fixture
def hybrid_data_posting():
    return HYBRID_DATA_POSTING


@pytest.fixture
def hourly_remote_posting():
    return HOURLY_REMOTE_POSTING


@pytest.fixture(params=[
    "",
    "   \n\t ",
    "#hashtag",
    "\x00\x01\x02 binary garbage \xff",
    "📍",
    "Role:",
    "$ - $ k to",
    "Must Have:\n,,,;;;|||",
    JAVA_ONSITE_POSTING,
    HYBRID_DATA_POSTING,
    HOURLY_REMOTE_POSTING,
    "java " * 5000,
    "7" * 50000,
])
def any_posting(request):
    """Well-formed and malformed inputs the extractor must survive."""
    return request.param
