# app.py
import logging
import threading
from dataclasses import asdict
from datetime import datetime, timezone

from flask import Flask, jsonify, request, Response

# Core Application Imports
from helpers.telemetry import telemetry_worker
from simglass.airplane.core import get_profile
from simglass.airplane.exceptions import UnknownAircraftError
from simglass.cockpit.core import AvionicsSession, TelemetrySource
from simglass.navigation.constants import TripConstants
from simglass.navigation.core import snapshot_to_dict
from simglass.navigation.data_models import Waypoint, WaypointType
from simglass.navigation.exceptions import NavigationError, VnavError
from simglass.navigation.plan_io import export_filename, export_garmin_fpl, import_plan
from simglass.navigation.simbrief import SimBriefClient
from simglass.navigation.vnav import format_minutes
from simglass.preferences import PreferenceStore
from simglass.runway.core import WindComponentResolver
from simglass.runway.data_models import RunwayCondition
from simglass.runway.runway_loader import AptDatRunwayLoader
from simglass.runway.weather import WeatherProvider

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

# Global State Dictionary
state = {
    'session': AvionicsSession(),
    'stop_event': threading.Event(),
    'preferences': PreferenceStore(),
    'weather': WeatherProvider(),
    'resolver': None,
    'simbrief': SimBriefClient(),
}


def _resolver() -> WindComponentResolver:
    if state['resolver'] is None:
        try:
            profile = get_profile(state['preferences'].get('aircraft_type'))
        except UnknownAircraftError as e:
            logging.warning(f"{e}; using the default aircraft")
            profile = None
        state['resolver'] = WindComponentResolver(AptDatRunwayLoader(), profile)
    return state['resolver']


def _waypoint_to_dict(wp: Waypoint) -> dict:
    return {
        'identifier': wp.identifier,
        'type': wp.waypoint_type.value,
        'lat': wp.lat,
        'lon': wp.lon,
        'altitude_ft': wp.altitude_ft,
        'dtk': None if wp.desired_track_deg is None else int(round(wp.desired_track_deg)) % 360,
        'distance_nm': round(wp.leg_distance_nm, 1),
        'ete': wp.ete,
        'active': wp.active,
    }


def _plan_response():
    plan = state['session'].flight_plan
    return jsonify({
        'waypoints': [_waypoint_to_dict(wp) for wp in plan.waypoints],
        'active_leg_index': plan.active_leg_index,
        'total_distance': round(plan.total_distance_nm, 1),
        'direct_to': plan.direct_to.identifier if plan.direct_to else None,
        'obs': {'active': plan.obs_mode, 'course': plan.obs_course},
    })


@app.route('/navigation')
def navigation():
    readout = state['session'].readout
    data = snapshot_to_dict(readout.navigation)
    data['source'] = readout.source.value
    data['degraded'] = readout.degraded
    if readout.aircraft:
        data['aircraft'] = asdict(readout.aircraft)
    return jsonify(data)


@app.route('/fuel')
def fuel():
    readout = state['session'].readout
    if readout.fuel is None:
        return jsonify({'available': False})
    return jsonify({
        'available': True,
        'current_lbs': round(readout.fuel.current_lbs, 1),
        'max_lbs': readout.fuel.max_lbs,
        'flow_pph': readout.fuel.flow_pph,
        'endurance': readout.fuel.endurance,
        'range_nm': round(readout.range_nm, 1),
        'status': readout.fuel_status,
        'destination': asdict(readout.destination_fuel),
    })


@app.route('/vnav')
def vnav():
    readout = state['session'].readout
    return jsonify({
        'constraint': asdict(readout.vnav_constraint) if readout.vnav_constraint else None,
        'profile': asdict(readout.vnav_profile) if readout.vnav_profile else None,
    })


@app.route('/vnav/settings', methods=['POST'])
def vnav_settings():
    data = request.json or {}
    changes = {key: data[key] for key in ('target_altitude_ft', 'descent_angle_deg', 'offset_nm', 'enabled')
               if key in data}
    try:
        settings = state['session'].update_vnav_settings(**changes)
    except VnavError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(asdict(settings))


@app.route('/crosswind/<station>')
def crosswind(station):
    requested_at = datetime.now(timezone.utc)
    report = state['weather'].get_wind(station)
    state['session'].apply_weather(report, requested_at)
    assessments = _resolver().assess(station, report.wind)
    return jsonify({
        'station': report.station,
        'wind': asdict(report.wind),
        'source': report.source,
        'degraded': report.degraded,
        'aircraft': _resolver().profile.short_name,
        'runways': [
            dict(asdict(a), condition=a.condition.value, status=a.status.value)
            for a in assessments
        ],
    })


@app.route('/crosswind/<station>/condition', methods=['POST'])
def runway_condition(station):
    data = request.json or {}
    try:
        condition = RunwayCondition(data.get('condition', 'dry'))
    except ValueError:
        return jsonify({'error': f"Unknown runway condition: {data.get('condition')}"}), 400
    if not data.get('runway_id'):
        return jsonify({'error': 'runway_id is required.'}), 400
    _resolver().set_condition(station, data['runway_id'], condition)
    return jsonify({'success': True})


@app.route('/aircraft', methods=['POST'])
def select_aircraft():
    data = request.json or {}
    try:
        profile = get_profile(data.get('aircraft_type', ''))
    except UnknownAircraftError as e:
        return jsonify({'error': str(e)}), 400
    state['preferences'].set('aircraft_type', profile.aircraft_id)
    _resolver().set_profile(profile)
    return jsonify(asdict(profile))


@app.route('/flightplan')
def flightplan():
    return _plan_response()


@app.route('/flightplan/import', methods=['POST'])
def flightplan_import():
    upload = request.files.get('file')
    if upload is not None:
        content, filename = upload.read().decode('utf-8', errors='replace'), upload.filename
    else:
        content, filename = request.get_data(as_text=True), request.args.get('filename')
    try:
        result = import_plan(content, filename)
        state['session'].load_plan(result.waypoints)
    except NavigationError as e:
        return jsonify({'error': str(e)}), 400
    logging.info(f"Imported {len(result.waypoints)} waypoints from {result.source} source")
    return jsonify({'imported': len(result.waypoints), 'skipped': result.skipped})


@app.route('/flightplan/simbrief', methods=['POST'])
def flightplan_simbrief():
    data = request.json or {}
    pilot_id = data.get('pilot_id') or state['preferences'].get('pilot_id')
    result = state['simbrief'].fetch_latest(pilot_id)
    if result is None:
        return jsonify({'error': 'SimBrief flight plan could not be loaded.'}), 502
    try:
        state['session'].load_plan(result.waypoints)
    except NavigationError as e:
        return jsonify({'error': str(e)}), 400
    if data.get('pilot_id'):
        state['preferences'].set('pilot_id', data['pilot_id'])
    return jsonify({'imported': len(result.waypoints), 'skipped': result.skipped,
                    'aircraft_type': result.aircraft_id})


@app.route('/flightplan/export')
def flightplan_export():
    plan = state['session'].flight_plan
    return Response(
        export_garmin_fpl(plan),
        mimetype='application/xml',
        headers={'Content-Disposition': f'attachment; filename={export_filename(plan)}'},
    )


@app.route('/flightplan/activate', methods=['POST'])
def flightplan_activate():
    data = request.json or {}
    index = data.get('index')
    if not isinstance(index, int):
        return jsonify({'error': 'index is required.'}), 400
    try:
        state['session'].activate_leg(index)
    except NavigationError as e:
        return jsonify({'error': str(e)}), 400
    return _plan_response()


@app.route('/flightplan/direct-to', methods=['POST', 'DELETE'])
def flightplan_direct_to():
    session = state['session']
    if request.method == 'DELETE':
        session.cancel_direct_to()
        return _plan_response()

    data = request.json or {}
    try:
        if 'lat' in data and 'lon' in data:
            target = Waypoint(identifier=str(data.get('identifier', 'USER')).upper(),
                              lat=float(data['lat']), lon=float(data['lon']),
                              waypoint_type=WaypointType.USER)
        else:
            target = str(data.get('identifier', '')).upper()
        session.direct_to(target)
    except (TypeError, ValueError) as e:
        return jsonify({'error': f'Invalid direct-to target: {e}'}), 400
    except NavigationError as e:
        return jsonify({'error': str(e)}), 400
    return _plan_response()


@app.route('/flightplan/obs', methods=['POST'])
def flightplan_obs():
    data = request.json or {}
    try:
        state['session'].set_obs(
            active=bool(data['active']) if 'active' in data else None,
            course=data.get('course'),
        )
    except (TypeError, ValueError) as e:
        return jsonify({'error': f'Invalid OBS course: {e}'}), 400
    return _plan_response()


@app.route('/trip')
def trip():
    try:
        manual_gs = float(request.args.get('gs', TripConstants.DEFAULT_MANUAL_GROUNDSPEED_KTS))
    except ValueError:
        return jsonify({'error': 'gs must be a number.'}), 400
    use_sensor = request.args.get('sensor', '1').lower() not in ('0', 'false', 'no')
    plan = state['session'].trip(manual_gs, use_sensor)
    return jsonify({
        'groundspeed': round(plan.groundspeed_kts),
        'legs': [{
            'identifier': leg.identifier,
            'type': leg.waypoint_type.value,
            'dtk': None if leg.desired_track_deg is None else int(round(leg.desired_track_deg)) % 360,
            'distance_nm': round(leg.distance_nm, 1),
            'ete': leg.ete,
            'altitude_ft': leg.altitude_ft,
        } for leg in plan.legs],
        'total_distance': round(plan.total_distance_nm, 1),
        'total_ete': plan.total_ete,
        'eta': plan.eta,
        'esa_ft': plan.esa_ft,
    })


@app.route('/source', methods=['POST'])
def source():
    data = request.json or {}
    try:
        selected = TelemetrySource(data.get('source', 'none'))
    except ValueError:
        return jsonify({'error': f"Unknown telemetry source: {data.get('source')}"}), 400
    session = state['session']
    session.set_source(selected)
    return jsonify({'source': session.source.value, 'degraded': session.degraded})


@app.route('/status')
def status():
    readout = state['session'].readout
    profile = readout.vnav_profile
    return jsonify({
        'source': readout.source.value,
        'degraded': readout.degraded,
        'updated_at': readout.updated_at.isoformat(),
        'time_to_tod': profile.time_to_tod if profile else format_minutes(None),
        'preferences': state['preferences'].as_dict(),
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    worker = threading.Thread(target=telemetry_worker, args=(state,), daemon=True)
    worker.start()
    try:
        app.run(debug=True, use_reloader=False)
    finally:
        state['stop_event'].set()
        state['session'].stop()
