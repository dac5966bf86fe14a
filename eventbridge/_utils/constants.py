# Environment variables
ENV_REGION = "AWS_REGION"
ENV_DEFAULT_REGION = "AWS_DEFAULT_REGION"
ENV_ENDPOINT_URL = "AWS_ENDPOINT_URL"

# Headers
HEADER_TARGET = "x-amz-target"
HEADER_CONTENT_TYPE = "content-type"

# Wire values
TARGET_PREFIX = "AWSEvents"
CONTENT_TYPE_JSON_1_1 = "application/x-amz-json-1.1"

# Hosts
SERVICE_HOST_TEMPLATE = "{service}.{region}.amazonaws.com"
