PROJECT_NAME = "Panelhub"
API_V1_STR = "/api/v1"
VERSION = "0.1.0"
ORG_ID_HEADER = "X-Org-Id"
