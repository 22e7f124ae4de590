# API Route Constants

# Room routes
ROOM_BASE = '/rooms'
ROOM_LIST = ROOM_BASE
ROOM_CREATE = ROOM_BASE
ROOM_RESERVE = f'{ROOM_BASE}/{{room_id}}/reserve'
ROOM_PAY = f'{ROOM_BASE}/{{room_id}}/pay'

# System routes
HEALTH = '/health'
