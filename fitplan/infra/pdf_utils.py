import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def _pct(rate: float) -> str:
    return f"{round(rate * 100)}%"


def generate_pdf_for_week(week: dict, rows: list) -> bytes:
    """Generate a weekly report: one line per day plus the week's completion rates."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Weekly Summary – Week {week['weekNumber']}", styles["Title"]),
        Paragraph(week["dateRange"], styles["Heading2"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Meals", "Workout", "Exercises", "4 km Walk"]]
    for r in rows:
        data.append([
            f"Day {r['dayNumber']} – {r['day'].capitalize()} ({r['date']})",
            f"{r['mealsCompleted']}/{r['mealsPlanned']}",
            "Done" if r["workoutCompleted"] else "-",
            f"{r['exercisesCompleted']}/{r['exercisesPlanned']}",
            "Done" if r["dailyWalkCompleted"] else "-",
        ])
    data.append([
        "Week",
        _pct(week["mealCompletionRate"]),
        _pct(week["workoutCompletionRate"]),
        _pct(week["exerciseCompletionRate"]),
        _pct(week["dailyWalkCompletionRate"]),
    ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#6D28D9")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("ALIGN", (0,1), (0,-1), "LEFT"),
        ("ROWBACKGROUNDS", (0,1), (-1,-2), [colors.white, colors.HexColor("#F3F0FF")]),
        ("LINEABOVE", (0,-1), (-1,-1), 1, colors.HexColor("#6D28D9")),
        ("GRID", (0,0), (-1,-2), 0.25, colors.lightgrey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
