# /examples/E010_communicator.py

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from simglass.fg_interface import FGConnection
from simglass.constants.flightgear import FGProps

# Connect
fg = FGConnection()
result = fg.connect()
if not result["success"]:
    print(f"Failed: {result['message']}")
    print(result["data"]["solution"])
    sys.exit(1)

# Read position and ground speed in one pass
readings = fg.get_many([FGProps.FLIGHT.LATITUDE, FGProps.FLIGHT.LONGITUDE, FGProps.FLIGHT.GROUNDSPEED_KT])
for prop, response in readings.items():
    if response["success"]:
        print(f"{prop}: {response['data']['value']}")
    else:
        print(f"{prop}: {response['message']}")

fg.disconnect()
