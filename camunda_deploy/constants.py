"""Global constants for camunda-deploy"""

import re

APP_NAME = "camunda-deploy"

# Endpoint
DEPLOYMENT_CREATE_PATH = "/deployment/create"
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

# Multipart field names understood by the engine
FIELD_DEPLOYMENT_NAME = "deployment-name"
FIELD_TENANT_ID = "tenant-id"
FIELD_DEPLOYMENT_SOURCE = "deployment-source"
FIELD_DEPLOY_CHANGED_ONLY = "deploy-changed-only"

# The engine skips resources that are byte-identical to the last deployment
DEPLOY_CHANGED_ONLY = "true"

# Environment variables
ENV_URL = "CAMUNDA_URL"
ENV_AUTH_USERNAME = "CAMUNDA_AUTH_USERNAME"
ENV_AUTH_PASSWORD = "CAMUNDA_AUTH_PASSWORD"
ENV_AUTH_BEARER = "CAMUNDA_AUTH_BEARER"
ENV_REQUEST_TIMEOUT = "CAMUNDA_DEPLOY_TIMEOUT"

DOTENV_FILE = ".env"

# (response key, output name) for each artifact type the engine reports
DEPLOYED_ARTIFACT_TYPES = [
    ("deployedProcessDefinitions", "processDefinitions"),
    ("deployedCaseDefinitions", "caseDefinitions"),
    ("deployedDecisionDefinitions", "decisionDefinitions"),
    ("deployedDecisionRequirementsDefinitions", "decisionRequirementsDefinitions"),
]

# Artifact version assigned by the engine on first deployment
INITIAL_ARTIFACT_VERSION = 1

# Keys masked before anything is serialized for display
REDACTED_KEYS = ("password", "token")
REDACTED_VALUE = "************"

GLOB_MAGIC_PATTERN = re.compile(r"[*?\[{]")

LOG_FORMAT = "%(message)s"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "CD001"
    VALIDATION_ERROR = "CD002"
    DEPLOYMENT_FAILED = "CD003"
    TRANSPORT_FAILED = "CD004"
    RESOURCE_UNREADABLE = "CD005"


# Display constants
SYMBOL_SUCCESS = "✔"
SYMBOL_ERROR = "✖"
SYMBOL_PROGRESS = "○"
SYMBOL_DONE = "●"

MSG_VERBOSE_HINT = "Run with --verbose for additional debug output."
