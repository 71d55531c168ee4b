"""Test Summary Script - Runs every app's tests and reports a per-app summary"""
import re
import subprocess
import sys

# Test packages of the CRM apps
TEST_MODULES = [
    'core.events.tests',
    'core.user_accounts.tests',
    'core.attributes.tests',
    'contacts.organization.tests',
    'contacts.person.tests',
]


def summarize(module, output):
    """Parse the Django test runner output into counts"""
    match = re.search(r'Ran (\d+) test', output)
    if not match:
        return {'module': module, 'total': 0, 'failed': 0, 'status': 'NO TESTS'}

    total = int(match.group(1))
    failures = re.search(r'failures=(\d+)', output)
    errors = re.search(r'errors=(\d+)', output)
    failed = sum(int(m.group(1)) for m in (failures, errors) if m)

    return {
        'module': module,
        'total': total,
        'failed': failed,
        'status': 'FAILED' if failed else 'OK',
    }


def run_tests(module):
    """Run one test package in a separate process"""
    try:
        result = subprocess.run(
            [sys.executable, 'manage.py', 'test', module, '-v', '0'],
            capture_output=True,
            text=True,
            timeout=300
        )
    except subprocess.TimeoutExpired:
        return {'module': module, 'total': 0, 'failed': 0, 'status': 'TIMEOUT'}

    return summarize(module, result.stdout + result.stderr)


def main():
    print("=" * 80)
    print("CRM TEST SUITE SUMMARY")
    print("=" * 80)

    results = []
    for module in TEST_MODULES:
        print(f"Running {module}...", end=' ', flush=True)
        result = run_tests(module)
        results.append(result)
        print(f"{result['status']} - {result['total']} tests")

    total_tests = sum(r['total'] for r in results)
    total_failed = sum(r['failed'] for r in results)

    print()
    print("=" * 80)
    print(f"Total Tests: {total_tests}")
    print(f"Passed: {total_tests - total_failed}")
    print(f"Failed: {total_failed}")
    print("-" * 80)
    for result in results:
        passed = result['total'] - result['failed']
        print(f"{result['status']:8} {result['module']:40} {passed:4}/{result['total']:4} passed")
    print("=" * 80)

    all_ok = all(r['status'] == 'OK' for r in results)
    sys.exit(0 if all_ok else 1)


if __name__ == '__main__':
    main()
