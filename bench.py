import json
from pathlib import Path
from typing import Dict
from tqdm import tqdm
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from mazegen.config_loader import load_config, parse_size
from mazegen.pdf_export import export_summary_pdf
from mazegen.cli import run_single
from mazegen.maze_gen.generator import MazeConfig


def maze_config(cfg: Dict, i: int) -> MazeConfig:
    m = cfg.get('maze', {})
    w, h = parse_size(m.get('size') or '21x21')
    base_seed = m.get('seed') or 0
    return MazeConfig(
        width=w,
        height=h,
        entrance=m.get('entrance') or 'Anywhere',
        exit=m.get('exit') or 'Anywhere',
        start_color=int(m.get('start_color', 7)),
        end_color=int(m.get('end_color', 2)),
        default_color=int(m.get('default_color', 1)),
        seed=base_seed + i,
        cell_px=int(m.get('cell_px') or 24),
        transparent_walls=bool(m.get('transparent_walls', False)),
    )


def run_batch(cfg: Dict, outdir: Path) -> Dict:
    n = int(cfg.get('count') or 5)
    workers = int(cfg.get('workers') or max(1, min(n, (os.cpu_count() or 4))))
    report = bool(cfg.get('report', True))
    mazes_dir = outdir / 'mazes'

    def _task(i: int):
        item = run_single(maze_config(cfg, i), mazes_dir, report=report)
        item.pop('maze')
        return item

    results = []
    # each task owns its grid and random source, so mazes build independently
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = {ex.submit(_task, i): i for i in range(n)}
        pbar = tqdm(total=n, desc='Mazes')
        for fut in as_completed(futures):
            i = futures[fut]
            try:
                r = fut.result()
                results.append(r)
            except Exception as e:
                results.append({'index': i, 'scores': {}, 'error': str(e)})
            pbar.update(1)
        pbar.close()

    results.sort(key=lambda r: r.get('seed', r.get('index', 0)))
    ok = [r for r in results if not r.get('error')]
    avg = round(sum(r['scores']['solution_length'] for r in ok)/len(ok), 2) if ok else 0
    summary = {'avg_solution_length': avg, 'items': results}
    (outdir / 'summary.json').write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')
    if cfg.get('pdf', True):
        export_summary_pdf(str(outdir / 'summary.pdf'), 'Maze Batch Summary', summary, image_paths=[r['img_path'] for r in ok])
    return summary


def main():
    cfg = load_config()
    outdir = Path(cfg.get('output_dir') or 'outputs')
    outdir.mkdir(parents=True, exist_ok=True)
    print('Generating', cfg.get('count') or 5, 'mazes of size', cfg.get('maze', {}).get('size'))
    summary = run_batch(cfg, outdir)
    failed = sum(1 for r in summary['items'] if r.get('error'))
    print(f"Done. {len(summary['items']) - failed} mazes, {failed} failed. Summaries saved to", outdir)

if __name__ == '__main__':
    main()
