from typing import Dict
import json
from pathlib import Path
import base64

TEMPLATE_PATH = Path(__file__).parent / 'html_template.j2'

def _render(template: str, context: Dict[str, str]) -> str:
    out = template
    for k, v in context.items():
        out = out.replace(f"%%{k}%%", v)
    return out


def generate_report(output_path: str, maze: Dict, scores: Dict, failure_snapshot: str, image_path: str):
    html = TEMPLATE_PATH.read_text(encoding='utf-8')
    with open(image_path, 'rb') as f:
        b64 = base64.b64encode(f.read()).decode('utf-8')
    img_src = f"data:image/png;base64,{b64}"
    ctx = {
        'WIDTH': str(maze['width']),
        'HEIGHT': str(maze['height']),
        'SEED': str(maze['seed']),
        'ENTRANCE_RULE': maze['entrance_rule'],
        'EXIT_RULE': maze['exit_rule'],
        'START': json.dumps(list(maze['start'])),
        'GOAL': json.dumps(list(maze['goal'])),
        'OK': str(scores['ok']),
        'SOLUTION_LENGTH': str(scores['solution_length']),
        'DEAD_ENDS': str(scores['dead_ends']),
        'JUNCTIONS': str(scores['junctions']),
        'OPEN_RATIO': str(scores['open_ratio']),
        'STRAIGHTNESS': str(scores['straightness']),
        'SP': json.dumps([list(p) for p in maze['shortest_path']]),
        'FAIL': failure_snapshot,
        'IMG_SRC': img_src,
    }
    rendered = _render(html, ctx)
    Path(output_path).write_text(rendered, encoding='utf-8')
