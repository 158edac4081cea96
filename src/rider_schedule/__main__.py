from src.rider_schedule.cli import main

raise SystemExit(main())
