import sys

import raidcalc
from raidcalc.array import OperatingParameters
from raidcalc.util import set_up_logging

set_up_logging(console_logs=["raidcalc"])

# usage: evaluate.py LEVEL CAPACITY [CAPACITY ...]
level = sys.argv[1] if len(sys.argv) > 1 else "5"
capacities = [float(c) for c in sys.argv[2:]] or [4, 4, 4, 4]

result = raidcalc.evaluate(capacities, level, OperatingParameters(price_per_drive=120))

print("%s, %d drives" % (result.level.label, result.drive_count))
print(raidcalc.export_csv(result, delimiter="\t"))
for issue in result.issues:
    print("%s: %s" % (issue.kind.name, issue.message))
