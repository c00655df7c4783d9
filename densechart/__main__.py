from densechart.cli import main

raise SystemExit(main())
