from readme_motion.cli import main

raise SystemExit(main())
