# Log event names (attached to log records as `extra={'event': ...}`)
SHORT_LINK_CREATED = 'SHORT_LINK_CREATED'
SHORT_LINK_RESOLVED = 'SHORT_LINK_RESOLVED'
SHORT_LINK_NOT_FOUND = 'SHORT_LINK_NOT_FOUND'
SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
STORAGE_FAILURE = 'STORAGE_FAILURE'
REQUEST_REJECTED = 'REQUEST_REJECTED'
