"""Google Compute cloud constants."""

from cloud_agents.domains.images.models import (
    SOURCE_ID_FIELD,
    SOURCE_IMAGES_JSON,
)

CLOUD_CODE = "google"
DISPLAY_NAME = "Google Compute"

# Secure parameters are kept out of plain profile settings by the host
SECURE_PROPERTY_PREFIX = "secure:"
ACCESS_KEY = SECURE_PROPERTY_PREFIX + "accessKey"

# Prefix the host adds to form fields that carry profile properties
PROPERTY_FORM_PREFIX = "prop:"

VM_NAME_PREFIX = SOURCE_ID_FIELD
IMAGES_DATA = SOURCE_IMAGES_JSON

# Labels stamped on started instances
TAG_SERVER = "teamcityServer"
TAG_DATA = "teamcityData"
TAG_PROFILE = "teamcityProfile"
TAG_SOURCE = "teamcitySource"

# Agent configuration parameter reported by agents running on our instances
INSTANCE_NAME = "instance-name"
