from datetime import datetime
import pytz
from flask import Blueprint, request, jsonify, current_app
from app.services.period_service import PeriodService

periods_bp = Blueprint('periods', __name__)

def school_now():
    return datetime.now(pytz.timezone(current_app.config['SCHOOL_TIMEZONE']))

@periods_bp.route('', methods=['GET'])
def list_periods():
    return jsonify(PeriodService.list_periods())

@periods_bp.route('/current', methods=['GET'])
def current_period():
    now = school_now()
    slot = PeriodService.current_slot(now)

    day = request.args.get('day')
    period_id = request.args.get('periodId')
    if day or period_id:
        # Filter selection overrides the clock for the header only
        slot['headerText'] = PeriodService.header_text(now, day=day, period_id=period_id)
        slot['day'] = day or slot['day']
        slot['periodId'] = period_id or slot['periodId']

    return jsonify(slot)
