import raidcalc
from raidcalc.devicelibs import raid
from raidcalc.util import set_up_logging

set_up_logging()

# compare every level that can be built from eight 12 TB drives
drives = [12] * 8
for level in raid.raid_levels:
    result = raidcalc.evaluate(drives, level)
    if not result.is_valid:
        print("%-9s %s" % (level.label, "; ".join(i.message for i in result.errors)))
        continue

    print("%-9s usable %6.1f TB  tolerance %d  URE %5.1f%%  %s" % (level.label, result.usable,
                                                                  result.failure_tolerance,
                                                                  result.ure_percent,
                                                                  level.use_case))
