from godspeed_installer.cli import main

raise SystemExit(main())
