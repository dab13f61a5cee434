#!/usr/bin/env python3
"""
Analyze match debug logs to spot decision-model imbalances.

Usage:
    python tools/analyze_match_log.py <log_file_path>
"""

import re
import sys
from collections import Counter, defaultdict
from pathlib import Path

EVENT_RE = re.compile(r'MATCH_EVENT: Minute: (-?\d+) \| Event: (\w+) \| Details: (.+)$')
DECISION_RE = re.compile(
    r'DECISION: Minute: (\d+) \| Side: (\w+) \| (#\d+ \w+ [^|]+?) \| Action: (\w+) \| '
    r'Success: (True|False) \| P: ([\d.]+)'
)


def parse_log_file(log_path):
    """Parse the debug log and extract match events and decisions."""

    events = []
    event_types = Counter()
    decisions = []
    goals = []

    with open(log_path, 'r', encoding='utf-8') as f:
        for line in f:
            match = EVENT_RE.search(line)
            if match:
                minute, event_type, details = match.groups()
                minute = int(minute)
                event_types[event_type] += 1
                events.append((minute, event_type, details.strip()))
                if event_type in ('goal_for', 'goal_against'):
                    goals.append((minute, event_type, details.strip()))
                continue

            match = DECISION_RE.search(line)
            if match:
                minute, side, player, action, success, prob = match.groups()
                decisions.append({
                    'minute': int(minute),
                    'side': side,
                    'player': player.strip(),
                    'action': action,
                    'success': success == 'True',
                    'probability': float(prob),
                })

    return {
        'events': events,
        'event_types': event_types,
        'decisions': decisions,
        'goals': goals,
    }


def analyze_decisions(decisions):
    """Summarise chosen actions and success rates per side."""
    print("\n=== DECISION ANALYSIS ===")
    print(f"Total decisions: {len(decisions)}")

    if not decisions:
        print("  ⚠️  No decisions found - was the log produced by the engine?")
        return

    by_side = defaultdict(Counter)
    successes = defaultdict(Counter)
    for d in decisions:
        by_side[d['side']][d['action']] += 1
        if d['success']:
            successes[d['side']][d['action']] += 1

    for side in sorted(by_side):
        total = sum(by_side[side].values())
        print(f"  {side}: {total} decisions")
        for action, count in by_side[side].most_common():
            rate = successes[side][action] / count * 100
            print(f"    {action:<9} {count:3d}  ({count / total * 100:4.1f}%)  success {rate:5.1f}%")

    avg_prob = sum(d['probability'] for d in decisions) / len(decisions)
    print(f"  Average chosen-action probability: {avg_prob:.3f}")
    if avg_prob > 0.5:
        print("  ⚠️  Decisions are close to deterministic - scoring spread may be too wide")


def analyze_player_activity(decisions):
    """Report the busiest and quietest players."""
    print("\n=== PLAYER ACTIVITY ANALYSIS ===")
    involvement = Counter(d['player'] for d in decisions)
    if not involvement:
        return
    busiest = involvement.most_common(1)[0]
    quietest = min(involvement.items(), key=lambda x: x[1])
    print(f"  Most involved: {busiest[0]} ({busiest[1]} decisions)")
    print(f"  Least involved: {quietest[0]} ({quietest[1]} decisions)")


def analyze_goals(goals):
    """List the goals in order."""
    print("\n=== GOALS ===")
    if not goals:
        print("  Goalless")
        return
    for minute, event_type, details in goals:
        print(f"  {minute}' {event_type}: {details}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python tools/analyze_match_log.py <log_file_path>")
        print("\nExample:")
        print("  python tools/analyze_match_log.py debug_logs/match_debug_20251117_222236.txt")
        sys.exit(1)

    log_path = Path(sys.argv[1])

    if not log_path.exists():
        print(f"Error: Log file not found: {log_path}")
        sys.exit(1)

    print(f"Analyzing: {log_path.name}")
    print("=" * 60)

    data = parse_log_file(log_path)

    print("\n=== EVENT SUMMARY ===")
    for event_type, count in data['event_types'].most_common(15):
        print(f"  {event_type}: {count}")

    analyze_decisions(data['decisions'])
    analyze_player_activity(data['decisions'])
    analyze_goals(data['goals'])

    print("\n" + "=" * 60)
    print("Analysis complete!")


if __name__ == '__main__':
    main()
