from typing import List, Dict
from pathlib import Path
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm


def export_summary_pdf(output_path: str, title: str, summary: Dict, image_paths: List[str] | None = None):
    p = canvas.Canvas(output_path, pagesize=A4)
    width, height = A4
    p.setFont("Helvetica-Bold", 16)
    p.drawString(2*cm, height-2*cm, title)
    p.setFont("Helvetica", 11)
    y = height - 3*cm
    avg = summary.get('avg_solution_length')
    if avg is not None:
        p.drawString(2*cm, y, f"Average solution length: {avg}")
        y -= 0.8*cm
    items = summary.get('items') or []
    valid = sum(1 for it in items if it.get('scores', {}).get('ok'))
    p.drawString(2*cm, y, f"Mazes: {len(items)}  valid: {valid}")
    y -= 0.8*cm
    for i, it in enumerate(items[:40]):
        if it.get('error'):
            line = f"[{i}] error: {it['error']}"
        else:
            s = it.get('scores', {})
            line = (f"[{i}] seed={it.get('seed')} ok={s.get('ok')} len={s.get('solution_length')} "
                    f"dead_ends={s.get('dead_ends')} junctions={s.get('junctions')} straight={s.get('straightness')}")
        p.drawString(2*cm, y, line)
        y -= 0.6*cm
        if y < 4*cm:
            p.showPage()
            p.setFont("Helvetica", 11)
            y = height - 3*cm
    # Sample page with the first maze image
    if image_paths:
        img = image_paths[0]
        if img and Path(img).exists():
            p.showPage()
            p.setFont("Helvetica", 11)
            p.drawString(2*cm, height-2*cm, "Sample Maze")
            p.drawImage(img, 2*cm, 4*cm, width=16*cm, height=height-8*cm, preserveAspectRatio=True, mask='auto')
    p.save()
