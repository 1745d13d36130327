"""
HTML templates for customer booking emails.

Placeholders use `{name}` and are filled by `render_template`; unknown or
empty values render as an empty string.
"""

from parcelx.enums.notification_type import NotificationType

_FOOTER = """
        <div style="background: #1f2937; color: #9ca3af; padding: 20px; text-align: center; font-size: 12px;">
          <p style="margin: 0;">&copy; ParcelX Flights. All rights reserved.</p>
          <p style="margin: 10px 0 0 0;">If you have any questions, please contact our support team.</p>
        </div>
"""

_ROW = """
              <tr>
                <td style="padding: 8px 0; color: #6b7280;">{label}</td>
                <td style="padding: 8px 0; font-weight: bold;">{value}</td>
              </tr>"""


def _rows(*pairs):
    return "".join(
        _ROW.replace("{label}", label).replace("{value}", value) for label, value in pairs
    )


def _header(color, subtitle=""):
    sub = ""
    if subtitle:
        sub = '<p style="margin: 10px 0 0 0; font-size: 18px;">' + subtitle + "</p>"
    return (
        '\n        <div style="background: ' + color + '; color: white; padding: 20px; text-align: center;">'
        '\n          <h1 style="margin: 0;">ParcelX Flights</h1>'
        "\n          " + sub + "\n        </div>\n"
    )


def _badge(color, text):
    return (
        '<span style="background: ' + color + "; color: white; padding: 4px 12px; "
        'border-radius: 4px; font-size: 12px;">' + text + "</span>"
    )


# booking_confirmed
_TICKET_HEADER = _header("#2563eb", "E-TICKET RECEIPT")
_TICKET_ROWS = _rows(
    ("Booking Reference (PNR):", "{booking_reference}"),
    ("E-Ticket Number:", "{eticket_number}"),
    ("Booking Status:", _badge("#059669", "CONFIRMED")),
    ("Issue Date:", "{issue_date}"),
)
_FLIGHT_ROWS = _rows(
    ("Airline:", "{airline_name}"),
    ("Flight Number:", "{flight_number}"),
    ("Class:", "{cabin_class}"),
    ("Passengers:", "{total_passengers}"),
)
_FARE_ROWS = _rows(
    ("Base Fare:", "${base_fare}"),
    ("Taxes &amp; Fees:", "${taxes_fees}"),
    ("Total Paid:", "${total_price}"),
    ("Payment Method:", "{payment_method}"),
)
_BAGGAGE_ROWS = _rows(("Cabin Bag:", "7 kg"), ("Checked Bag:", "23 kg"))

# payment_approved
_APPROVED_HEADER = _header("#059669")
_APPROVED_ROWS = _rows(
    ("Booking Reference:", "{booking_reference}"),
    ("Amount Paid:", "${total_price}"),
    ("Payment Method:", "{payment_method}"),
    ("Status:", _badge("#059669", "PAID")),
)

# booking_cancelled
_CANCELLED_HEADER = _header("#dc2626")
_CANCELLED_ROWS = _rows(
    ("Booking Reference:", "{booking_reference}"),
    ("Status:", _badge("#dc2626", "CANCELLED")),
)

# payment_rejected
_REJECTED_HEADER = _header("#f59e0b")
_REJECTED_ROWS = _rows(
    ("Booking Reference:", "{booking_reference}"),
    ("Amount Due:", "${total_price}"),
)

BOOKING_CONFIRMED_HTML = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; background: #fff;">
        {_TICKET_HEADER}
        <div style="padding: 30px; background: #f9fafb;">
          <div style="background: white; padding: 20px; border-radius: 8px; margin-bottom: 20px; border-left: 4px solid #059669;">
            <table style="width: 100%; border-collapse: collapse;">{_TICKET_ROWS}
            </table>
          </div>

          <div style="background: white; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
            <h3 style="margin-top: 0; color: #374151;">Passenger Information</h3>
            {{passengers_list}}
          </div>

          <div style="background: white; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
            <h3 style="margin-top: 0; color: #374151;">Flight Details</h3>
            <table style="width: 100%; border-collapse: collapse;">{_FLIGHT_ROWS}
            </table>
            <div style="display: flex; margin-top: 15px;">
              <div style="flex: 1; padding: 15px; background: #f0fdf4; border-radius: 8px; margin-right: 10px;">
                <p style="margin: 0 0 5px 0; color: #059669; font-weight: bold;">DEPARTURE</p>
                <p style="margin: 0; font-size: 18px; font-weight: bold;">{{departure_city}} ({{departure_code}})</p>
                <p style="margin: 5px 0 0 0; color: #6b7280;">{{departure_date}}</p>
                <p style="margin: 0; color: #6b7280;">{{departure_time}}</p>
              </div>
              <div style="flex: 1; padding: 15px; background: #fef3c7; border-radius: 8px;">
                <p style="margin: 0 0 5px 0; color: #d97706; font-weight: bold;">ARRIVAL</p>
                <p style="margin: 0; font-size: 18px; font-weight: bold;">{{arrival_city}} ({{arrival_code}})</p>
                <p style="margin: 5px 0 0 0; color: #6b7280;">{{departure_date}}</p>
                <p style="margin: 0; color: #6b7280;">{{arrival_time}}</p>
              </div>
            </div>
          </div>

          <div style="background: white; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
            <h3 style="margin-top: 0; color: #374151;">Fare &amp; Payment</h3>
            <table style="width: 100%; border-collapse: collapse;">{_FARE_ROWS}
            </table>
          </div>

          <div style="background: white; padding: 20px; border-radius: 8px;">
            <h3 style="margin-top: 0; color: #374151;">Baggage Allowance</h3>
            <table style="width: 100%; border-collapse: collapse;">{_BAGGAGE_ROWS}
            </table>
          </div>

          <p style="margin-top: 20px; color: #6b7280; font-size: 14px; text-align: center;">
            Please keep this e-ticket for your records. Present this at check-in.
          </p>
        </div>
        {_FOOTER}
      </div>
"""

PAYMENT_APPROVED_HTML = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        {_APPROVED_HEADER}
        <div style="padding: 30px; background: #f9fafb;">
          <h2 style="color: #1f2937;">Payment Approved!</h2>
          <p>Dear Customer,</p>
          <p>Your payment has been <strong style="color: #059669;">successfully verified and approved</strong>.</p>
          <div style="background: white; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="margin-top: 0; color: #374151;">Payment Details</h3>
            <table style="width: 100%; border-collapse: collapse;">{_APPROVED_ROWS}
            </table>
          </div>
          <p>Your booking is now fully confirmed. Thank you for your payment!</p>
        </div>
        {_FOOTER}
      </div>
"""

BOOKING_CANCELLED_HTML = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        {_CANCELLED_HEADER}
        <div style="padding: 30px; background: #f9fafb;">
          <h2 style="color: #1f2937;">Booking Cancelled</h2>
          <p>Dear Customer,</p>
          <p>We regret to inform you that your booking has been <strong style="color: #dc2626;">cancelled</strong>.</p>
          <div style="background: white; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="margin-top: 0; color: #374151;">Booking Details</h3>
            <table style="width: 100%; border-collapse: collapse;">{_CANCELLED_ROWS}
            </table>
          </div>
          <p>If you believe this was done in error or need assistance, please contact our support team immediately.</p>
          <p style="margin-top: 30px; color: #6b7280; font-size: 14px;">We apologize for any inconvenience caused.</p>
        </div>
        {_FOOTER}
      </div>
"""

PAYMENT_REJECTED_HTML = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        {_REJECTED_HEADER}
        <div style="padding: 30px; background: #f9fafb;">
          <h2 style="color: #1f2937;">Payment Verification Issue</h2>
          <p>Dear Customer,</p>
          <p>Unfortunately, we were <strong style="color: #dc2626;">unable to verify your payment</strong> for the following booking.</p>
          <div style="background: white; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="margin-top: 0; color: #374151;">Booking Details</h3>
            <table style="width: 100%; border-collapse: collapse;">{_REJECTED_ROWS}
            </table>
          </div>
          <p>Please re-submit your payment proof or contact our support team for assistance.</p>
          <p style="margin-top: 30px; color: #6b7280; font-size: 14px;">Your booking will remain pending until payment is verified.</p>
        </div>
        {_FOOTER}
      </div>
"""

EMAIL_TEMPLATES = {
    NotificationType.BOOKING_CONFIRMED: {
        "subject": "E-Ticket Receipt - {booking_reference}",
        "html": BOOKING_CONFIRMED_HTML,
    },
    NotificationType.PAYMENT_APPROVED: {
        "subject": "Payment Confirmed - {booking_reference}",
        "html": PAYMENT_APPROVED_HTML,
    },
    NotificationType.BOOKING_CANCELLED: {
        "subject": "Booking Cancelled - {booking_reference}",
        "html": BOOKING_CANCELLED_HTML,
    },
    NotificationType.PAYMENT_REJECTED: {
        "subject": "Payment Issue - {booking_reference}",
        "html": PAYMENT_REJECTED_HTML,
    },
}


def render_template(template: str, data: dict) -> str:
    result = template
    for key, value in data.items():
        result = result.replace("{" + key + "}", "" if value is None else str(value))
    return result
