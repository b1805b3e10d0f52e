"""Closed skill vocabulary and noise words used by the skills extractor.

Both objects are read-only and shared across calls.
"""

from types import MappingProxyType
from typing import Mapping

# lowercase token -> canonical display name
SKILL_DICTIONARY: Mapping[str, str] = MappingProxyType({
    # Languages
    "java": "Java",
    "python": "Python",
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "c#": "C#",
    "c++": "C++",
    "golang": "Go",
    "scala": "Scala",
    "kotlin": "Kotlin",
    "ruby": "Ruby",
    "php": "PHP",
    "swift": "Swift",
    "sql": "SQL",
    "pl/sql": "PL/SQL",
    "t-sql": "T-SQL",
    "cobol": "COBOL",
    "shell scripting": "Shell Scripting",
    "bash": "Bash",
    "powershell": "PowerShell",
    # Frameworks and runtimes
    "spring": "Spring",
    "spring boot": "Spring Boot",
    "hibernate": "Hibernate",
    "microservices": "Microservices",
    "j2ee": "J2EE",
    ".net": ".NET",
    ".net core": ".NET Core",
    "asp.net": "ASP.NET",
    "react": "React",
    "reactjs": "React",
    "react.js": "React",
    "angular": "Angular",
    "vue": "Vue.js",
    "vue.js": "Vue.js",
    "node.js": "Node.js",
    "nodejs": "Node.js",
    "django": "Django",
    "flask": "Flask",
    "fastapi": "FastAPI",
    "graphql": "GraphQL",
    "rest api": "REST APIs",
    "rest apis": "REST APIs",
    "redux": "Redux",
    "html": "HTML",
    "css": "CSS",
    "jest": "Jest",
    "selenium": "Selenium",
    "junit": "JUnit",
    # Cloud
    "aws": "AWS",
    "azure": "Azure",
    "gcp": "GCP",
    "google cloud": "GCP",
    # Data stores and messaging
    "oracle": "Oracle",
    "mysql": "MySQL",
    "postgresql": "PostgreSQL",
    "postgres": "PostgreSQL",
    "sql server": "SQL Server",
    "mongodb": "MongoDB",
    "cassandra": "Cassandra",
    "redis": "Redis",
    "dynamodb": "DynamoDB",
    "snowflake": "Snowflake",
    "kafka": "Kafka",
    "rabbitmq": "RabbitMQ",
    "spark": "Spark",
    "hadoop": "Hadoop",
    "databricks": "Databricks",
    "airflow": "Airflow",
    "etl": "ETL",
    # Tools and platforms
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "k8s": "Kubernetes",
    "terraform": "Terraform",
    "ansible": "Ansible",
    "jenkins": "Jenkins",
    "git": "Git",
    "github actions": "GitHub Actions",
    "ci/cd": "CI/CD",
    "linux": "Linux",
    "unix": "Unix",
    "jira": "Jira",
    "splunk": "Splunk",
    "tableau": "Tableau",
    "power bi": "Power BI",
    "salesforce": "Salesforce",
    "servicenow": "ServiceNow",
    "sap": "SAP",
    "mainframe": "Mainframe",
    "machine learning": "Machine Learning",
    # Process and domain
    "agile": "Agile",
    "scrum": "Scrum",
    "devops": "DevOps",
    "production support": "Production Support",
    "financial services": "Financial Services",
    "banking": "Banking",
    "healthcare": "Healthcare",
})

NOISE_WORDS = frozenset({
    "must", "have", "has", "had", "required", "require", "requires", "plus",
    "nice", "good", "to", "preferred", "recommended", "bonus", "strong",
    "solid", "hands-on", "hands", "on", "knowledge", "experience", "exp",
    "skills", "skill", "years", "year", "yrs", "yr", "and", "or", "with",
    "in", "of", "for", "at", "by", "from", "the", "a", "an", "is", "are",
    "be", "will", "should", "able", "ability", "i", "we", "you", "he", "she",
    "it", "they", "our", "your", "their", "us", "me", "them", "this", "that",
    "etc", "also", "any", "other", "using", "working", "work",
})
