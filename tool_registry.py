# tool_registry.py

TOOLS = {
    "get_flight_positions": {
        "desc": "Get real-time flight positions with various filtering options",
        "schema": {
            "type": "object",
            "properties": {
                "airports": {"type": "string", "description": "Comma-separated list of airport ICAO codes"},
                "bounds": {"type": "string", "description": "Geographical bounds (lat1,lon1,lat2,lon2)"},
                "categories": {"type": "string", "description": "Aircraft categories (P,C,J)"},
                "limit": {"type": "number", "description": "Maximum number of results"},
            },
        },
    },
    "get_flight_eta": {
        "desc": "Get estimated arrival time for a specific flight",
        "schema": {
            "type": "object",
            "properties": {
                "flightNumber": {
                    "type": "string",
                    "description": "Flight number (e.g., UA123)",
                    "pattern": "^[A-Z0-9]{2,8}$",
                },
            },
            "required": ["flightNumber"],
        },
    },
}
