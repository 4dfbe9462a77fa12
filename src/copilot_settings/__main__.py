from copilot_settings.cli import main

raise SystemExit(main())
